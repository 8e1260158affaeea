"""Configuration error hierarchy."""

from typing import Any


class ConfigError(Exception):
    """Raised when a configuration call is malformed."""


class NoHostError(ConfigError):
    """Raised when a connection string is built without any host."""

    def __init__(self, message: str = "At least one host is required to build a connection string"):
        super().__init__(message)


class UnknownScenarioError(ConfigError):
    """Raised when a scenario preset name is not registered."""

    def __init__(self, name: str, known: list[str]):
        self.name = name
        self.known = known
        super().__init__(f"Unknown scenario: {name!r} (supported: {known})")


class UnknownProfileError(ConfigError):
    """Raised when a SQLite tuning profile name is not registered."""

    def __init__(self, name: str, known: list[str]):
        self.name = name
        self.known = known
        super().__init__(f"Unknown SQLite profile: {name!r} (supported: {known})")


class InvalidConfigurationError(ConfigError):
    """Raised by the bootstrap layer when a resolved configuration is rejected."""

    def __init__(self, validation: Any):
        self.validation = validation
        detail = "; ".join(validation.errors)
        super().__init__(f"Configuration validation error: {detail}")
