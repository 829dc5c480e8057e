"""Commit creation, log display and changelog generation."""

import datetime

from ..config import CHANGELOG_HEADINGS, COMMIT_SUBJECT_RE
from .core import check, git

PRETTY_LOG_FORMAT = "--pretty=format:%C(yellow)%h%Creset %C(green)%ad%Creset | %s %C(red)[%an]%Creset"


def commit(runner, message):
    """Run `git commit -m <message>` and return the CommandResult unchecked."""
    return git(runner, "commit", "-m", message)


def amend(runner, no_edit=False):
    args = ["commit", "--amend"]
    if no_edit:
        args.append("--no-edit")
        return check(git(runner, *args), "Failed to amend commit.")
    # Opens the user's editor, so it must own the terminal.
    return check(git(runner, *args, capture=False), "Failed to amend commit.")


def push(runner, remote=None, branch=None):
    args = ["push"]
    if remote:
        args.append(remote)
        if branch:
            args.append(branch)
    return git(runner, *args)


def get_log(runner, count=10, pretty=False):
    args = ["log", "-n", str(count)]
    if pretty:
        args += [PRETTY_LOG_FORMAT, "--date=short"]
    result = check(git(runner, *args), "Failed to read git log.")
    return [line for line in result.stdout.splitlines() if line.strip()]


def get_commit_subjects(runner):
    result = check(git(runner, "log", "--pretty=format:%s"), "Failed to read git log.")
    return [line for line in result.stdout.splitlines() if line.strip()]


def group_subjects_by_type(subjects):
    """Group Conventional Commit subjects by type, keeping first-seen order."""
    groups = {}
    for subject in subjects:
        match = COMMIT_SUBJECT_RE.match(subject.strip())
        if not match:
            continue
        groups.setdefault(match.group(1), []).append(match.group(4).strip())
    return groups


def build_changelog(subjects, today=None):
    """Render a Markdown changelog for `subjects` dated `today`."""
    today = today or datetime.date.today()
    lines = ["# Changelog", "", f"## {today.isoformat()}", ""]
    for commit_type, messages in group_subjects_by_type(subjects).items():
        heading = CHANGELOG_HEADINGS.get(commit_type, commit_type[:1].upper() + commit_type[1:])
        lines.append(f"### {heading}")
        lines.append("")
        lines.extend(f"- {message}" for message in messages)
        lines.append("")
    return "\n".join(lines)
