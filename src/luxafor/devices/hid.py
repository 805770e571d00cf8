"""hidapi-backed transport for Luxafor devices."""

from __future__ import annotations

import concurrent.futures
import logging
import threading
from dataclasses import dataclass
from typing import Optional

import hid

from luxafor.exceptions import DeviceNotFoundError, TransportError, TransportTimeoutError
from luxafor.models import LuxaforConfig
from .device import LuxaforDevice

logger = logging.getLogger(__name__)


@dataclass
class HidDeviceInfo:
    """A connected HID device matching the vendor/product filter."""

    path: str
    vendor_id: int
    product_id: int
    serial_number: str = ""
    manufacturer: str = ""
    product: str = ""

    @classmethod
    def from_hidapi(cls, info: dict) -> HidDeviceInfo:
        """Build from one entry of ``hid.enumerate()``."""
        path = info.get("path", b"")
        if isinstance(path, bytes):
            path = path.decode("utf-8", errors="replace")
        return cls(
            path=path,
            vendor_id=info.get("vendor_id", 0),
            product_id=info.get("product_id", 0),
            serial_number=info.get("serial_number") or "",
            manufacturer=info.get("manufacturer_string") or "",
            product=info.get("product_string") or "",
        )


class HidTransport:
    """
    Transport writing packets to a HID device through hidapi.

    hidapi writes block until the OS accepts the report, so every write
    runs on one worker thread and the caller waits at most ``timeout_ms``.
    A write that times out keeps running; the next write queues behind it
    and close() waits for it before releasing the handle.
    """

    def __init__(self, handle, path: Optional[str] = None):
        """
        Initialize transport around an open hidapi handle.

        Args:
            handle: Open ``hid.device`` instance
            path: HID path the handle was opened from
        """
        self._handle = handle
        self._path = path
        self._executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="luxafor-hid"
        )
        self._close_lock = threading.Lock()
        self._closed = False

    @property
    def path(self) -> Optional[str]:
        """HID path of the open device."""
        return self._path

    @staticmethod
    def enumerate(vendor_id: int, product_id: int) -> list[HidDeviceInfo]:
        """
        List connected devices matching vendor_id/product_id.

        Raises:
            TransportError: If hidapi cannot enumerate devices
        """
        try:
            entries = hid.enumerate(vendor_id, product_id)
        except OSError as e:
            raise TransportError("Could not list HID devices", original_error=str(e)) from e
        return [HidDeviceInfo.from_hidapi(info) for info in entries]

    @classmethod
    def open(
        cls, vendor_id: int, product_id: int, path: Optional[str] = None
    ) -> HidTransport:
        """
        Open a device by explicit path, or the first one matching the IDs.

        Raises:
            DeviceNotFoundError: If no device matches
            TransportError: If hidapi fails to list or open the device
        """
        if path is None:
            matches = cls.enumerate(vendor_id, product_id)
            if not matches:
                raise DeviceNotFoundError(vendor_id, product_id)
            path = matches[0].path
            if len(matches) > 1:
                logger.info(f"{len(matches)} matching devices found, using {path}")

        handle = hid.device()
        try:
            handle.open_path(path.encode("utf-8"))
        except (OSError, ValueError) as e:
            raise TransportError(f"Could not open HID device {path}", original_error=str(e)) from e

        logger.info(f"Opened HID device {path}")
        return cls(handle, path)

    def write(self, data: bytes, timeout_ms: int) -> None:
        """Write one report, waiting at most timeout_ms (0 = indefinitely)."""
        with self._close_lock:
            if self._closed:
                raise TransportError(
                    "Failed to write to the device", original_error="transport is closed"
                )
            future = self._executor.submit(self._write_blocking, data)

        try:
            future.result(timeout=timeout_ms / 1000 if timeout_ms else None)
        except concurrent.futures.TimeoutError as e:
            raise TransportTimeoutError(timeout_ms) from e

    def _write_blocking(self, data: bytes) -> None:
        try:
            written = self._handle.write(data)
        except (OSError, ValueError) as e:
            raise TransportError("Failed to write to the device", original_error=str(e)) from e
        if written < 0:
            raise TransportError(
                "Failed to write to the device", original_error=f"hidapi write returned {written}"
            )

    def close(self) -> None:
        """Wait for any pending write, then close the hidapi handle."""
        with self._close_lock:
            if self._closed:
                return
            self._closed = True

        self._executor.shutdown(wait=True)
        self._handle.close()
        logger.debug(f"Closed HID device {self._path}")


def open_device(config: LuxaforConfig, path: Optional[str] = None) -> LuxaforDevice:
    """
    Open a LuxaforDevice using the IDs and preferred path from config.

    Args:
        config: Device selection settings
        path: Explicit HID path, overriding config.device_path
    """
    transport = HidTransport.open(
        config.vendor_id, config.product_id, path or config.device_path
    )
    return LuxaforDevice(transport, path=transport.path)
