"""Git utilities package."""

from .branches import (
    checkout_branch,
    create_branch,
    delete_branch,
    get_branches,
    get_current_branch,
    merge_branch,
    rebase_onto,
)
from .core import CommandResult, CommandRunner, check, git
from .history import (
    amend,
    build_changelog,
    commit,
    get_commit_subjects,
    get_log,
    group_subjects_by_type,
    push,
)
from .stage import has_staged_changes, stage_all, stage_files

__all__ = [
    "CommandResult",
    "CommandRunner",
    "check",
    "git",
    "has_staged_changes",
    "stage_all",
    "stage_files",
    "commit",
    "amend",
    "push",
    "get_log",
    "get_commit_subjects",
    "group_subjects_by_type",
    "build_changelog",
    "get_branches",
    "get_current_branch",
    "create_branch",
    "checkout_branch",
    "merge_branch",
    "rebase_onto",
    "delete_branch",
]
