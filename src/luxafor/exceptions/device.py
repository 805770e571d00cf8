"""Device and transport exceptions.

This module defines exceptions raised around the device lifecycle
and the byte transport underneath it:
- DeviceError: Base class for device errors
- UseAfterDisposeError: A command was sent to a closed device
- DeviceNotFoundError: No HID device matched the vendor/product filter
- TransportError: The transport failed to write or open
- TransportTimeoutError: The write did not complete within its timeout
"""

from typing import Optional

from .base import LuxaforError


class DeviceError(LuxaforError):
    """Device initialization or operation failed."""

    pass


class UseAfterDisposeError(DeviceError):
    """A command was sent to a device whose transport has been released."""

    def __init__(self, operation: str = "send command"):
        """
        Initialize use-after-dispose error.

        Args:
            operation: The operation that was attempted
        """
        super().__init__(
            user_message=f"Cannot {operation}: the device has been closed",
            technical_message=f"UseAfterDispose: attempted to {operation} on a disposed LuxaforDevice",
            recoverable=False,
            recovery_hint="Open a new device instead of reusing a closed one",
        )
        self.operation = operation


class DeviceNotFoundError(DeviceError):
    """No connected HID device matched the requested identifiers."""

    def __init__(self, vendor_id: int, product_id: int, path: Optional[str] = None):
        """
        Initialize device-not-found error.

        Args:
            vendor_id: USB vendor ID that was searched for
            product_id: USB product ID that was searched for
            path: Explicit HID path that was requested, if any
        """
        target = path if path else f"{vendor_id:04X}:{product_id:04X}"
        super().__init__(
            user_message=f"No Luxafor device found ({target})",
            technical_message=(
                f"No HID device matched vendor_id=0x{vendor_id:04X} "
                f"product_id=0x{product_id:04X} path={path!r}"
            ),
            recoverable=True,
            recovery_hint=(
                "Check that the device is plugged in and that you have permission "
                "to access it. Run 'luxafor list' to see connected devices."
            ),
        )
        self.vendor_id = vendor_id
        self.product_id = product_id
        self.path = path


class TransportError(DeviceError):
    """The underlying transport failed to open or to write."""

    def __init__(self, message: str, original_error: Optional[str] = None, **kwargs):
        """
        Initialize transport error.

        Args:
            message: User-friendly error message
            original_error: The original error message from the I/O library
        """
        tech_msg = message
        if original_error:
            tech_msg += f"\nOriginal error: {original_error}"
        kwargs.setdefault("technical_message", tech_msg)
        kwargs.setdefault("recoverable", True)
        super().__init__(message, **kwargs)
        self.original_error = original_error


class TransportTimeoutError(TransportError):
    """The write was not accepted by the transport within the timeout."""

    def __init__(self, timeout_ms: int):
        """
        Initialize transport timeout error.

        Args:
            timeout_ms: The timeout that elapsed, in milliseconds
        """
        super().__init__(
            f"Device did not accept the command within {timeout_ms} ms",
            recovery_hint="Increase the timeout or use 0 to wait indefinitely",
        )
        self.timeout_ms = timeout_ms
