from textwrap import dedent

import pytest

import kommit as km
from kommit.parsing import parse_scopes, parse_types


FULL_CONFIG = dedent(
    """
    types:
      - feat: A new feature
      - fix: A bug fix
      - chore
      - "docs: Documentation only"

    scopes:
      all:
        - a
        - b
      feat:
        - c
      docs: []

    options:
      allowCustomScopes: false
      allowEmptyScopes: "TRUE"
      allowBreakingChanges:
        - feat
      allowIssues: [feat, fix]
      issuePrefix: "Closes:"
      autoPush: true
      someFutureOption: 42
    """
)


def test_parse_types_keeps_document_order():
    config = km.parse_config("types:\n  - feat: A new feature\n  - fix: A bug fix")
    assert config.types == (
        km.TypeEntry("feat", "A new feature"),
        km.TypeEntry("fix", "A bug fix"),
    )


def test_type_without_colon_has_empty_description():
    config = km.parse_config("types:\n  - chore\n")
    assert config.types == (km.TypeEntry("chore", ""),)


def test_scalar_and_map_type_entries_coexist():
    config = km.parse_config(FULL_CONFIG)
    assert config.type_names == ["feat", "fix", "chore", "docs"]
    assert config.types[3].description == "Documentation only"


def test_map_entry_with_null_description():
    config = km.parse_config("types:\n  - feat:\n")
    assert config.types == (km.TypeEntry("feat", ""),)


@pytest.mark.parametrize(
    "text",
    [
        "scopes:\n  all: [a]\n",
        "types:\n",
        "types: []\n",
        "",
    ],
)
def test_missing_or_empty_types(text):
    with pytest.raises(km.NoCommitTypes):
        km.parse_config(text)


@pytest.mark.parametrize(
    "text",
    [
        "types:\n  - {feat: a, fix: b}\n",
        "types:\n  - [feat]\n",
        "types:\n  - feat: a\n  - feat: b\n",
        "types:\n  - ': nothing'\n",
        "types: feat\n",
    ],
)
def test_invalid_types_entries(text):
    with pytest.raises(km.InvalidTypesEntry):
        km.parse_config(text)


def test_invalid_scope_entry_names_the_group():
    with pytest.raises(km.InvalidScopeEntry) as excinfo:
        km.parse_config("types: [feat]\nscopes:\n  ui: core\n")
    assert excinfo.value.key == "ui"
    assert "'ui'" in str(excinfo.value)


def test_root_must_be_a_map():
    with pytest.raises(km.ConfigError):
        km.parse_config("- feat\n- fix\n")


def test_malformed_yaml_is_config_error():
    with pytest.raises(km.ConfigError):
        km.parse_config("types: [feat\n")


def test_missing_scopes_and_options_use_defaults():
    config = km.parse_config("types: [feat]\n")
    assert config.scopes == {}
    assert config.options == km.resolve_options(None)
    assert config.options.allow_custom_scopes is True
    assert config.options.allow_empty_scopes is True
    assert config.options.allow_breaking_changes == frozenset()
    assert config.options.issue_prefix == "ISSUES CLOSED:"
    assert config.options.changes_prefix == "BREAKING CHANGE:"
    assert config.options.auto_stage is False
    assert config.options.auto_push is False
    assert config.options.remind_to_stage_changes is False


def test_options_are_resolved():
    options = km.parse_config(FULL_CONFIG).options
    assert options.allow_custom_scopes is False
    assert options.allow_empty_scopes is True
    assert options.allow_breaking_changes == {"feat"}
    assert options.allow_issues == {"feat", "fix"}
    assert options.issue_prefix == "Closes:"
    assert options.auto_push is True


def test_quoted_prefix_is_unwrapped():
    options = km.parse_config("types: [feat]\noptions:\n  changesPrefix: '\"BREAKING:\"'\n").options
    assert options.changes_prefix == "BREAKING:"


def test_unparseable_boolean_is_fatal():
    with pytest.raises(km.InvalidOptionValue) as excinfo:
        km.parse_config("types: [feat]\noptions:\n  autoPush: maybe\n")
    assert excinfo.value.key == "autoPush"


@pytest.mark.parametrize("value", ["yes", "no", "on", "off", "Yes", "1"])
def test_yaml_style_booleans_are_rejected(value):
    with pytest.raises(km.InvalidOptionValue) as excinfo:
        km.parse_config(f"types: [feat]\noptions:\n  autoPush: {value}\n")
    assert excinfo.value.key == "autoPush"


@pytest.mark.parametrize("value, expected", [("true", True), ("FALSE", False), ("'True'", True)])
def test_true_false_in_any_case(value, expected):
    options = km.parse_config(f"types: [feat]\noptions:\n  autoStage: {value}\n").options
    assert options.auto_stage is expected


def test_option_without_value_keeps_default():
    options = km.parse_config("types: [feat]\noptions:\n  autoPush:\n  issuePrefix:\n").options
    assert options.auto_push is False
    assert options.issue_prefix == "ISSUES CLOSED:"


def test_scope_names_are_not_coerced():
    config = km.parse_config("types: [feat]\nscopes:\n  all:\n    - on\n    - off\n")
    assert config.scopes == {"all": ["on", "off"]}


def test_type_names_are_not_coerced():
    config = km.parse_config("types:\n  - no\n  - yes: Affirmative\n")
    assert config.types == (km.TypeEntry("no", ""), km.TypeEntry("yes", "Affirmative"))


def test_numeric_looking_scopes_keep_their_text():
    config = km.parse_config("types: [feat]\nscopes:\n  all: [1.10, 010]\n")
    assert config.scopes["all"] == ["1.10", "010"]


@pytest.mark.parametrize(
    "text, error",
    [
        ("types: [feat]\nscopes:\n  ui: [[a]]\n", km.InvalidScopeEntry),
        ("types: [feat]\noptions:\n  allowIssues: feat\n", km.InvalidOptionValue),
        ("types: [feat]\noptions:\n  allowBreakingChanges: [[feat]]\n", km.InvalidOptionValue),
        ("types: [feat]\noptions:\n  issuePrefix: [a]\n", km.InvalidOptionValue),
        ("types: [feat]\noptions:\n  autoPush: yes\n", km.InvalidOptionValue),
        ("types: [feat]\nscopes: [a]\n", km.ConfigError),
        ("types: [feat]\nscopes: ui\n", km.ConfigError),
        ("types: [feat]\noptions: [a]\n", km.ConfigError),
        ("types: [feat]\noptions: x\n", km.ConfigError),
        ("types: [feat]\nscopes:\n  ? [a]\n  : [b]\n", km.ConfigError),
    ],
)
def test_malformed_sections_are_rejected(text, error):
    with pytest.raises(error):
        km.parse_config(text)


def test_nested_scope_list_names_the_group():
    with pytest.raises(km.InvalidScopeEntry) as excinfo:
        km.parse_config("types: [feat]\nscopes:\n  ui: [[a]]\n")
    assert excinfo.value.key == "ui"


def test_non_string_keys_are_rejected():
    with pytest.raises(km.InvalidScopeEntry):
        parse_scopes({None: ["a"]})
    with pytest.raises(km.InvalidTypesEntry):
        parse_types([{None: "Something"}])
    with pytest.raises(km.InvalidTypesEntry):
        parse_types([{1: "One"}])


def test_null_looking_keys_keep_their_text():
    config = km.parse_config("types:\n  - ~: Tilde\nscopes:\n  null: [a]\n")
    assert config.type_names == ["~"]
    assert config.scopes == {"null": ["a"]}


def test_resolve_options_uses_supplied_defaults():
    defaults = dict(km.DEFAULT_OPTIONS, auto_stage=True)
    assert km.resolve_options({}, defaults=defaults).auto_stage is True
    assert km.resolve_options({"autoStage": "false"}, defaults=defaults).auto_stage is False


@pytest.mark.parametrize(
    "commit_type, expected",
    [("feat", ["c"]), ("fix", ["a", "b"]), ("docs", [])],
)
def test_scopes_for_type_fallback(commit_type, expected):
    config = km.parse_config(FULL_CONFIG)
    assert km.scopes_for_type(config, commit_type) == expected


def test_scopes_for_type_without_all_group():
    config = km.parse_config("types: [feat, docs]\nscopes:\n  feat: [c]\n")
    assert km.scopes_for_type(config, "docs") == []


def test_load_config_missing_file(tmp_path):
    with pytest.raises(km.ConfigNotFound):
        km.load_config(tmp_path / ".kommit.yaml")


def test_load_config_reads_file(tmp_path, write_file):
    path = write_file(tmp_path, ".kommit.yaml", "types:\n  - fix: Bug fix\n")
    assert km.load_config(path).type_names == ["fix"]
