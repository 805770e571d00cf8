"""
Helpers the outer layers (CLI, config loading) use to turn failures into
LuxaforError instances and show them.

| Scenario | Use This |
|----------|----------|
| Numeric field out of range | `OutOfRangeError` (raised by models/commands) |
| Command sent after close | `UseAfterDisposeError` |
| Write failed / timed out | `TransportError` / `TransportTimeoutError` |
| Config file not JSON | `ConfigFileInvalidError` |
| Config value rejected | `ConfigValidationError` |
"""

from typing import Optional

from pydantic import ValidationError

from .base import LuxaforError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError


def config_error_from_validation(error: ValidationError, file_path: str) -> ConfigurationError:
    """
    Convert a pydantic failure on LuxaforConfig into a config error.

    Malformed JSON becomes ConfigFileInvalidError; rejected values become a
    single ConfigValidationError naming every offending field.
    """
    details = error.errors()
    for detail in details:
        if detail["type"] == "json_invalid":
            return ConfigFileInvalidError(file_path, detail.get("ctx", {}).get("error", detail["msg"]))

    problems: dict[str, str] = {}
    values = {}
    for detail in details:
        name = ".".join(str(part) for part in detail["loc"]) or "config"
        problems.setdefault(name, detail["msg"])
        values.setdefault(name, detail.get("input"))
    return ConfigValidationError(file_path, problems, values)


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """Return (message, recovery hint or None) for the CLI."""
    if isinstance(error, LuxaforError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None
