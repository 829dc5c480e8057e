"""Index (staging area) helpers."""

from ..errors import SubprocessError
from .core import check, git


def has_staged_changes(runner):
    """
    Return True when `git diff --cached --name-only` lists any file.

    Any failure, including git not being installed, counts as nothing staged.
    """
    try:
        result = git(runner, "diff", "--cached", "--name-only")
    except SubprocessError:
        return False
    return result.ok and bool(result.stdout.strip())


def stage_all(runner):
    return check(git(runner, "add", "."), "Failed to stage changes.")


def stage_files(runner, files):
    return check(git(runner, "add", *files), "Failed to stage files.")
