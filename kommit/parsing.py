"""Parse .kommit.yaml text into a ResolvedConfig."""

from pathlib import Path

import yaml

from .config import ALL_SCOPES_KEY, DEFAULT_OPTIONS, OPTION_KEYS
from .errors import (
    ConfigError,
    ConfigNotFound,
    InvalidOptionValue,
    InvalidScopeEntry,
    InvalidTypesEntry,
    NoCommitTypes,
)
from .models import ResolvedConfig, ResolvedOptions, TypeEntry


def load_config(path):
    """Read the config file at `path` and parse it."""
    config_file = Path(path)
    if not config_file.is_file():
        raise ConfigNotFound(path)
    return parse_config(config_file.read_text(encoding="utf-8"))


def parse_config(raw_text):
    """
    Parse raw YAML text into a ResolvedConfig.

    Scalars are loaded verbatim as strings (no implicit booleans or numbers),
    so `- on` stays a scope and `1.10` keeps its trailing zero. Raises a
    ConfigError subclass when the document is malformed or defines no commit
    types. Missing `scopes` and `options` sections fall back to an empty
    mapping and the default options.
    """
    try:
        root = yaml.load(raw_text or "", Loader=yaml.BaseLoader)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse configuration: {exc}") from exc

    if _is_empty(root):
        root = {}
    if not isinstance(root, dict):
        raise ConfigError("Configuration root must be a map.")

    return ResolvedConfig(
        types=parse_types(root.get("types")),
        scopes=parse_scopes(root.get("scopes")),
        options=resolve_options(root.get("options")),
    )


def _is_empty(node):
    # BaseLoader yields "" for a key with no value.
    return node is None or node == ""


def parse_types(node):
    if _is_empty(node):
        raise NoCommitTypes()
    if not isinstance(node, list):
        raise InvalidTypesEntry("Value for 'types' is invalid: Expected a list.")
    if not node:
        raise NoCommitTypes()

    entries = []
    seen = set()
    for item in node:
        entry = _type_entry(item)
        if entry.type in seen:
            raise InvalidTypesEntry(f"Duplicate commit type '{entry.type}'.")
        seen.add(entry.type)
        entries.append(entry)
    return tuple(entries)


def _type_entry(item):
    if isinstance(item, str):
        key, _, description = item.partition(":")
        key, description = key.strip(), description.strip()
    elif isinstance(item, dict) and len(item) == 1:
        ((key, value),) = item.items()
        if not isinstance(key, str):
            raise InvalidTypesEntry(f"Commit type name must be a string, got {key!r}.")
        if not isinstance(value, str):
            raise InvalidTypesEntry(f"Description for type '{key}' must be a string.")
        key, description = key.strip(), value.strip()
    else:
        raise InvalidTypesEntry(
            f"Value for 'types' is invalid: Expected a string or single-entry map, got {item!r}."
        )

    if not key:
        raise InvalidTypesEntry(f"Commit type entry {item!r} has an empty name.")
    return TypeEntry(key, description)


def parse_scopes(node):
    if _is_empty(node):
        return {}
    if not isinstance(node, dict):
        raise ConfigError("Value for 'scopes' is invalid: Expected a map.")

    scopes = {}
    for key, value in node.items():
        if not isinstance(key, str):
            raise InvalidScopeEntry(repr(key), "must be named by a string")
        key = key.strip()
        if not isinstance(value, list) or not all(isinstance(scope, str) for scope in value):
            raise InvalidScopeEntry(key)
        scopes[key] = [scope.strip() for scope in value]
    return scopes


def resolve_options(node, defaults=DEFAULT_OPTIONS):
    """Apply `defaults` to the raw `options` mapping. Unknown keys are ignored."""
    if _is_empty(node):
        node = {}
    if not isinstance(node, dict):
        raise ConfigError("Value for 'options' is invalid: Expected a map.")

    values = dict(defaults)
    for key, (field_name, kind) in OPTION_KEYS.items():
        if _is_empty(node.get(key)):
            continue
        raw = node[key]
        if kind == "bool":
            values[field_name] = _as_bool(key, raw)
        elif kind == "list":
            values[field_name] = frozenset(_as_str_list(key, raw))
        else:
            values[field_name] = _as_str(key, raw)
    return ResolvedOptions(**values)


def scopes_for_type(config, commit_type):
    """Scopes offered for `commit_type`: its own group, else `all`, else none."""
    if commit_type in config.scopes:
        return list(config.scopes[commit_type])
    return list(config.scopes.get(ALL_SCOPES_KEY, []))


def _as_bool(key, value):
    if isinstance(value, str):
        lowered = _strip_quotes(value.strip()).lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    raise InvalidOptionValue(key, value, "true or false")


def _as_str_list(key, value):
    if not isinstance(value, list):
        raise InvalidOptionValue(key, value, "a list of commit types")
    result = []
    for item in value:
        if not isinstance(item, str):
            raise InvalidOptionValue(key, item, "a commit type name")
        result.append(_strip_quotes(item.strip()))
    return result


def _as_str(key, value):
    if not isinstance(value, str):
        raise InvalidOptionValue(key, value, "a string")
    return _strip_quotes(value.strip())


def _strip_quotes(text):
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "\"'":
        return text[1:-1]
    return text
