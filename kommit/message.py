"""Commit message assembly."""

import re

_DIGITS_RE = re.compile(r"^\d+$")


def format_header(answers):
    """Return `<type>[(<scope>)][!]: <description>`."""
    header = answers.selected_type
    if answers.scope.strip():
        header += f"({answers.scope})"
    if answers.is_breaking:
        header += "!"
    return f"{header}: {answers.short_description}"


def assemble_message(answers, options):
    """
    Build the final commit message from collected answers.

    Optional blocks (long description, breaking change footer, issues footer)
    are appended in that order, each preceded by one blank line. A breaking
    change with no detail is signalled by `!` in the header only.
    """
    blocks = [format_header(answers)]

    if answers.long_description.strip():
        blocks.append(answers.long_description)

    if answers.is_breaking and answers.breaking_detail.strip():
        blocks.append(f"{options.changes_prefix} {answers.breaking_detail}")

    if answers.issues_ref.strip():
        blocks.append(f"{options.issue_prefix} {answers.issues_ref}")

    return "\n\n".join(blocks)


def normalize_issues(raw):
    """
    Normalize comma-separated issue references to `#N, #M`.

    Tokens that are not all digits once a leading `#` is removed are dropped.
    Returns an empty string when nothing survives.
    """
    tokens = []
    for token in (raw or "").split(","):
        token = token.strip()
        if token.startswith("#"):
            token = token[1:]
        if _DIGITS_RE.match(token):
            tokens.append(f"#{token}")
    return ", ".join(tokens)
