"""Kommit: interactive conventional commits driven by a YAML configuration."""

# Re-export the public API for library-style usage (and tests).
from .cli import cli, main
from .config import DEFAULT_OPTIONS, __version__
from .errors import (
    ConfigError,
    ConfigNotFound,
    InvalidOptionValue,
    InvalidScopeEntry,
    InvalidTypesEntry,
    KommitError,
    NoCommitTypes,
    PromptError,
    SubprocessError,
)
from .git import CommandResult, CommandRunner, build_changelog, has_staged_changes
from .message import assemble_message, format_header, normalize_issues
from .models import Answers, ResolvedConfig, ResolvedOptions, TypeEntry
from .parsing import load_config, parse_config, resolve_options, scopes_for_type
from .prompts import PromptEngine, parse_yes_no
from .staging import (
    PostCommitAction,
    PreflightAction,
    decide_post_commit,
    decide_preflight,
    needs_staging_check,
)

__all__ = [
    "__version__",
    # CLI
    "cli",
    "main",
    # Config
    "DEFAULT_OPTIONS",
    "TypeEntry",
    "ResolvedOptions",
    "ResolvedConfig",
    "Answers",
    "parse_config",
    "load_config",
    "resolve_options",
    "scopes_for_type",
    # Prompts / message
    "PromptEngine",
    "parse_yes_no",
    "assemble_message",
    "format_header",
    "normalize_issues",
    # Staging
    "PreflightAction",
    "PostCommitAction",
    "decide_preflight",
    "decide_post_commit",
    "needs_staging_check",
    # Git
    "CommandResult",
    "CommandRunner",
    "has_staged_changes",
    "build_changelog",
    # Errors
    "KommitError",
    "ConfigError",
    "ConfigNotFound",
    "NoCommitTypes",
    "InvalidTypesEntry",
    "InvalidScopeEntry",
    "InvalidOptionValue",
    "PromptError",
    "SubprocessError",
]
