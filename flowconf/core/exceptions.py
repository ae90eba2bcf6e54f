"""
Exceptions raised while loading a config script.
"""

from typing import Any


class ConfigValidationError(ValueError):
    """Raised when the config script is invalid. The message is shown to the user."""

    pass


class InternalError(RuntimeError):
    """Raised when loading hits a condition that should never happen."""

    pass


def check_condition(condition: bool, message: str) -> None:
    """Raise ConfigValidationError(message) when condition is false."""
    if not condition:
        raise ConfigValidationError(message)


def check_not_missing(value: Any, field: str) -> Any:
    """Return value, or raise ConfigValidationError if it is None or a blank string."""
    if value is None or (isinstance(value, str) and value.strip() == ""):
        raise ConfigValidationError(f"{field} is missing")
    return value
