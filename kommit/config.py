"""Configuration constants and defaults for kommit."""

import re

__version__ = "0.1.0"

DEFAULT_CONFIG_PATH = ".kommit.yaml"

# Upper bound on re-prompts for the commit type menu, so piped input cannot
# spin forever.
MAX_SELECTION_ATTEMPTS = 5

DEFAULT_OPTIONS = {
    "allow_custom_scopes": True,
    "allow_empty_scopes": True,
    "allow_breaking_changes": frozenset(),
    "allow_issues": frozenset(),
    "issue_prefix": "ISSUES CLOSED:",
    "changes_prefix": "BREAKING CHANGE:",
    "remind_to_stage_changes": False,
    "auto_stage": False,
    "auto_push": False,
}

# YAML option key -> (ResolvedOptions field, kind)
OPTION_KEYS = {
    "allowCustomScopes": ("allow_custom_scopes", "bool"),
    "allowEmptyScopes": ("allow_empty_scopes", "bool"),
    "allowBreakingChanges": ("allow_breaking_changes", "list"),
    "allowIssues": ("allow_issues", "list"),
    "issuePrefix": ("issue_prefix", "str"),
    "changesPrefix": ("changes_prefix", "str"),
    "remindToStageChanges": ("remind_to_stage_changes", "bool"),
    "autoStage": ("auto_stage", "bool"),
    "autoPush": ("auto_push", "bool"),
}

ALL_SCOPES_KEY = "all"

CUSTOM_SCOPE_LABEL = "Other (custom scope)"
EMPTY_SCOPE_LABEL = "None (empty scope)"

COMMIT_SUBJECT_RE = re.compile(r"^(\w+)(\(.*\))?(!)?:(.+)$")

CHANGELOG_HEADINGS = {
    "feat": "Features",
    "fix": "Bug Fixes",
    "docs": "Documentation",
    "style": "Styling",
    "refactor": "Refactors",
    "perf": "Performance",
    "test": "Tests",
    "build": "Build",
    "ci": "CI",
    "chore": "Chores",
}

DEFAULT_CONFIG_TEMPLATE = """\
# Simple Conventional Commit Configuration

types:
  - feat: A new feature
  - fix: A bug fix
  - docs: Documentation only changes
  - refactor: A code change that neither fixes a bug nor adds a feature
  - chore: Other changes that don't modify src or test files

scopes:
  all:
    - core
    - ui
    - api
    - docs

options:
  allowBreakingChanges:
    - feat
    - fix
  allowIssues:
    - feat
    - fix
"""
