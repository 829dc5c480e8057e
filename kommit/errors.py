"""Exceptions raised by kommit."""


class KommitError(Exception):
    """Base class for every error kommit reports to the user."""


class ConfigError(KommitError):
    """The configuration file is missing or malformed."""


class ConfigNotFound(ConfigError):
    def __init__(self, path):
        self.path = path
        super().__init__(
            f"Configuration file '{path}' not found. Create one with 'kommit create' "
            "or specify a path with --config."
        )


class NoCommitTypes(ConfigError):
    def __init__(self):
        super().__init__("No commit types defined in configuration.")


class InvalidTypesEntry(ConfigError):
    pass


class InvalidScopeEntry(ConfigError):
    def __init__(self, key, reason="must be a list of strings"):
        self.key = key
        super().__init__(f"Scope '{key}' {reason}.")


class InvalidOptionValue(ConfigError):
    def __init__(self, key, value, expected):
        self.key = key
        super().__init__(f"Option '{key}' has invalid value {value!r}: expected {expected}.")


class PromptError(KommitError):
    """Required interactive input was missing or invalid."""


class SubprocessError(KommitError):
    """An external command failed to launch or exited non-zero."""

    def __init__(self, message, stderr=""):
        self.stderr = stderr or ""
        super().__init__(message)
