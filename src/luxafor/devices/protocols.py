"""Transport protocol the device writes packets through."""

from typing import Protocol


class Transport(Protocol):
    """Protocol for a write-capable byte transport.

    A transport is opened before it is handed to a LuxaforDevice, and the
    device closes it exactly once when the device itself is closed.
    """

    def write(self, data: bytes, timeout_ms: int) -> None:
        """
        Write one complete packet.

        Args:
            data: Bytes to write (a full packet, report marker included)
            timeout_ms: Maximum time to wait in milliseconds (0 = wait indefinitely)

        Raises:
            TransportTimeoutError: If the write did not complete within timeout_ms
            TransportError: If the write failed
        """
        ...

    def close(self) -> None:
        """Release the underlying handle."""
        ...
