"""Base exception class for Luxafor.

All custom exceptions inherit from LuxaforError to allow catching
all package-specific errors in one place. The base class provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue
"""

from typing import Optional


class LuxaforError(Exception):
    """
    Base exception for all Luxafor errors.

    Attributes:
        user_message: Human-friendly message for display
        technical_message: Detailed message for logging
        recoverable: Whether the error can be recovered from
        recovery_hint: Optional hint for how to fix the issue
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
        *args,
        **kwargs
    ):
        """
        Initialize a Luxafor error.

        Args:
            user_message: Message to show to users
            technical_message: Detailed message for logs (defaults to user_message)
            recoverable: True if operation can be retried/recovered
            recovery_hint: Suggestion for how to fix the issue
        """
        super().__init__(user_message, *args, **kwargs)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        """Return user-friendly message."""
        return self.user_message

    def get_full_message(self) -> str:
        """Get complete error message with recovery hint."""
        msg = self.user_message
        if self.recovery_hint:
            msg += f"\n\nSuggestion: {self.recovery_hint}"
        return msg


class OutOfRangeError(LuxaforError):
    """A numeric field (channel, LED index, speed, repeat) is outside its byte range.

    Raised once, at construction time. Serialization never raises it.
    """

    def __init__(self, field: str, value: int, low: int = 0, high: int = 255):
        """
        Initialize out-of-range error.

        Args:
            field: Name of the offending field (e.g. "r", "speed", "index")
            value: The rejected value
            low: Smallest accepted value
            high: Largest accepted value
        """
        super().__init__(
            user_message=f"'{field}' must be between {low} and {high}, got {value}",
            technical_message=f"OutOfRange: {field}={value!r} not in [{low}, {high}]",
            recoverable=True,
            recovery_hint=f"Use a value from {low} to {high} for '{field}'",
        )
        self.field = field
        self.value = value
        self.low = low
        self.high = high
