"""Interactive prompt engine that collects commit message answers."""

import sys

import click

from .config import CUSTOM_SCOPE_LABEL, EMPTY_SCOPE_LABEL, MAX_SELECTION_ATTEMPTS
from .errors import PromptError
from .message import normalize_issues
from .models import Answers
from .parsing import scopes_for_type

_YES = ("y", "yes")
_NO = ("n", "no")


def read_stdin_line(prompt=""):
    """
    Read one line from stdin, echoing `prompt` first.

    Returns None at end of input.
    """
    if prompt:
        click.echo(prompt, nl=False)
    line = sys.stdin.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


def parse_yes_no(response, default_yes=False):
    """
    Interpret a yes/no answer.

    With `default_yes` anything except an explicit "n"/"no" is affirmative;
    otherwise only "y"/"yes" is.
    """
    answer = (response or "").strip().lower()
    if default_yes:
        return answer not in _NO
    return answer in _YES


def format_type_menu(types):
    lines = []
    for idx, entry in enumerate(types, start=1):
        if entry.description.strip():
            lines.append(f"{idx}. {entry.type} - {entry.description}")
        else:
            lines.append(f"{idx}. {entry.type}")
    return "\n".join(lines)


def format_menu(options):
    return "\n".join(f"{idx}. {option}" for idx, option in enumerate(options, start=1))


def parse_choice(raw, size):
    """Return the 0-based index for a 1-based menu answer, or None if invalid."""
    try:
        choice = int((raw or "").strip())
    except ValueError:
        return None
    if 1 <= choice <= size:
        return choice - 1
    return None


def select_from_menu(options, read_line, echo, title, max_attempts=MAX_SELECTION_ATTEMPTS, menu_text=None):
    """
    Show a numbered menu and re-prompt until a valid choice is made.

    `menu_text` replaces the default rendering of `options`. Raises
    PromptError at end of input or after `max_attempts` invalid answers.
    """
    echo(f"\n{title}:")
    echo(format_menu(options) if menu_text is None else menu_text)
    for _ in range(max_attempts):
        raw = read_line(f"Enter your choice (1-{len(options)}): ")
        if raw is None:
            raise PromptError("No selection made.")
        choice = parse_choice(raw, len(options))
        if choice is not None:
            return choice
        echo("Invalid selection. Please try again.")
    raise PromptError(f"No valid selection after {max_attempts} attempts.")


class PromptEngine:
    """Drives the commit prompts in order: type, scope, descriptions, footers."""

    def __init__(self, config, read_line=None, echo=None, max_attempts=MAX_SELECTION_ATTEMPTS):
        self.config = config
        self.options = config.options
        self.read_line = read_line or read_stdin_line
        self.echo = echo or click.echo
        self.max_attempts = max(1, int(max_attempts))

    def _ask(self, message):
        self.echo(f"\n{message}:")
        line = self.read_line("")
        return (line or "").strip()

    def ask_yes_no(self, message, default_yes=False):
        hint = "Y/n" if default_yes else "y/N"
        self.echo(f"\n{message} ({hint}):")
        return parse_yes_no(self.read_line(""), default_yes=default_yes)

    def select_type(self):
        types = self.config.types
        choice = select_from_menu(
            types,
            self.read_line,
            self.echo,
            "Select the type of change",
            self.max_attempts,
            menu_text=format_type_menu(types),
        )
        return types[choice].type

    def _custom_scope(self, message):
        scope = self._ask(message)
        if not scope and not self.options.allow_empty_scopes:
            raise PromptError("A scope is required (allowEmptyScopes is false).")
        return scope

    def select_scope(self, commit_type):
        scopes = scopes_for_type(self.config, commit_type)
        allow_custom = self.options.allow_custom_scopes
        allow_empty = self.options.allow_empty_scopes

        if not scopes:
            if allow_custom:
                return self._custom_scope("Enter scope")
            if allow_empty:
                return ""
            raise PromptError("No scopes available and empty scopes are disabled.")

        choices = list(scopes)
        if allow_custom:
            choices.append(CUSTOM_SCOPE_LABEL)
        if allow_empty:
            choices.append(EMPTY_SCOPE_LABEL)

        self.echo("\nSelect a scope:")
        self.echo(format_menu(choices))
        choice = parse_choice(self.read_line(f"Enter your choice (1-{len(choices)}): "), len(choices))
        if choice is None:
            raise PromptError("Invalid scope selection.")

        if allow_empty and choice == len(choices) - 1:
            return ""
        custom_index = len(choices) - 2 if allow_empty else len(choices) - 1
        if allow_custom and choice == custom_index:
            return self._custom_scope("Enter custom scope")
        return choices[choice]

    def short_description(self):
        description = self._ask("Enter a short description")
        if not description:
            raise PromptError("Description cannot be empty.")
        return description

    def long_description(self):
        if not self.ask_yes_no("Do you want to add a longer description?"):
            return ""
        self.echo("\nEnter a longer description (finish with an empty line):")
        lines = []
        while True:
            line = self.read_line("")
            if line is None or not line.strip():
                break
            lines.append(line)
        return "\n".join(lines).rstrip()

    def breaking_change(self, commit_type):
        """Return (is_breaking, detail)."""
        if commit_type not in self.options.allow_breaking_changes:
            return False, ""
        if not self.ask_yes_no("Is this a breaking change?"):
            return False, ""
        return True, self._ask("Describe the breaking change")

    def issue_references(self, commit_type):
        if commit_type not in self.options.allow_issues:
            return ""
        if not self.ask_yes_no("Does this commit close any issues?"):
            return ""
        return normalize_issues(self._ask("Enter issue references (e.g., #123, #456)"))

    def collect(self):
        """Run every step in order and return the collected Answers."""
        commit_type = self.select_type()
        scope = self.select_scope(commit_type)
        short = self.short_description()
        long_desc = self.long_description()
        is_breaking, detail = self.breaking_change(commit_type)
        issues = self.issue_references(commit_type)
        return Answers(
            selected_type=commit_type,
            scope=scope,
            short_description=short,
            long_description=long_desc,
            is_breaking=is_breaking,
            breaking_detail=detail,
            issues_ref=issues,
        )

    def confirm(self, message="Do you want to commit with this message?"):
        return self.ask_yes_no(message, default_yes=True)
