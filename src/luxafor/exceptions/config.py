"""Errors raised while reading ~/.luxafor/config.json."""

from typing import Any

from .base import LuxaforError

# Extra guidance per LuxaforConfig field
FIELD_HINTS = {
    "vendor_id": "Run 'luxafor list' to check the USB IDs; the Luxafor default is 0x04D8",
    "product_id": "Run 'luxafor list' to check the USB IDs; the Luxafor default is 0xF372",
    "default_timeout_ms": "Use a whole number of milliseconds, 0 waits indefinitely",
    "device_path": "Use a path shown by 'luxafor list', or null for the first device",
}


class ConfigurationError(LuxaforError):
    """The config file could not be used."""


class ConfigFileInvalidError(ConfigurationError):
    """The config file is unreadable, empty or not JSON."""

    def __init__(self, file_path: str, parse_error: str):
        self.file_path = file_path
        self.parse_error = parse_error
        super().__init__(
            user_message=f"Cannot read configuration file {file_path}",
            technical_message=f"{file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=(
                f"Fix it by hand ({parse_error}) or run 'luxafor config reset'"
            ),
        )


class ConfigValidationError(ConfigurationError):
    """The config file is valid JSON but a setting is not acceptable.

    ``problems`` maps each rejected field to pydantic's message for it.
    """

    def __init__(self, file_path: str, problems: dict[str, str], values: dict[str, Any] | None = None):
        self.file_path = file_path
        self.problems = problems
        self.values = values or {}

        fields = ", ".join(f"'{name}'" for name in problems)
        details = "; ".join(f"{name}: {msg}" for name, msg in problems.items())
        hints = [FIELD_HINTS[name] for name in problems if name in FIELD_HINTS]
        hints.append(f"Edit {file_path} or use 'luxafor config set FIELD VALUE'")

        super().__init__(
            user_message=f"Invalid setting {fields} ({details})",
            technical_message=f"{file_path}: invalid values {self.values!r}: {details}",
            recoverable=True,
            recovery_hint="\n".join(hints),
        )

    @property
    def field(self) -> str:
        """First rejected field."""
        return next(iter(self.problems))
