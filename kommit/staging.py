"""Decide what to do about staged changes before and after committing."""

from enum import Enum


class PreflightAction(Enum):
    PROCEED = "proceed"
    AUTO_STAGE = "auto_stage"
    REMIND = "remind"


class PostCommitAction(Enum):
    PUSH = "push"
    NO_OP = "no_op"


def needs_staging_check(options):
    """Only look at the index when a staging option could act on the result."""
    return options.auto_stage or options.remind_to_stage_changes


def decide_preflight(staged, options):
    """
    Choose the pre-commit staging action.

    `auto_stage` wins over `remind_to_stage_changes` when both are set.
    """
    if staged:
        return PreflightAction.PROCEED
    if options.auto_stage:
        return PreflightAction.AUTO_STAGE
    if options.remind_to_stage_changes:
        return PreflightAction.REMIND
    return PreflightAction.PROCEED


def decide_post_commit(commit_succeeded, options):
    if commit_succeeded and options.auto_push:
        return PostCommitAction.PUSH
    return PostCommitAction.NO_OP
