"""Value types shared by the parser, prompt engine and message assembler."""

from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Tuple


@dataclass(frozen=True)
class TypeEntry:
    type: str
    description: str = ""


@dataclass(frozen=True)
class ResolvedOptions:
    """Options after defaults have been applied."""

    allow_custom_scopes: bool
    allow_empty_scopes: bool
    allow_breaking_changes: FrozenSet[str]
    allow_issues: FrozenSet[str]
    issue_prefix: str
    changes_prefix: str
    remind_to_stage_changes: bool
    auto_stage: bool
    auto_push: bool


@dataclass(frozen=True)
class ResolvedConfig:
    types: Tuple[TypeEntry, ...]
    scopes: Dict[str, List[str]]
    options: ResolvedOptions

    @property
    def type_names(self):
        return [entry.type for entry in self.types]


@dataclass(frozen=True)
class Answers:
    """Everything the user chose during one interactive session."""

    selected_type: str
    short_description: str
    scope: str = ""
    long_description: str = ""
    is_breaking: bool = False
    breaking_detail: str = ""
    issues_ref: str = ""
