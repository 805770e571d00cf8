"""Unit tests for the hidapi transport (hidapi itself is mocked)."""

import threading
from unittest.mock import MagicMock, patch

import pytest

from luxafor.devices import LuxaforDevice
from luxafor.devices.hid import HidDeviceInfo, HidTransport, open_device
from luxafor.exceptions import DeviceNotFoundError, TransportError, TransportTimeoutError
from luxafor.models import ALL_LEDS, Color, LuxaforConfig

HIDAPI_ENTRY = {
    "path": b"/dev/hidraw3",
    "vendor_id": 0x04D8,
    "product_id": 0xF372,
    "serial_number": "",
    "manufacturer_string": "Microchip Technology Inc.",
    "product_string": "LUXAFOR FLAG",
}


@pytest.fixture
def mock_hid():
    """Patch the hid module used by the transport."""
    with patch("luxafor.devices.hid.hid") as mock:
        handle = MagicMock()
        handle.write.return_value = 9
        mock.device.return_value = handle
        mock.enumerate.return_value = [HIDAPI_ENTRY]
        yield mock


@pytest.fixture
def handle(mock_hid):
    return mock_hid.device.return_value


class TestEnumerate:
    """Test device listing."""

    @pytest.mark.unit
    def test_enumerate_filters_by_ids(self, mock_hid):
        devices = HidTransport.enumerate(0x04D8, 0xF372)

        mock_hid.enumerate.assert_called_once_with(0x04D8, 0xF372)
        assert devices == [
            HidDeviceInfo(
                path="/dev/hidraw3",
                vendor_id=0x04D8,
                product_id=0xF372,
                serial_number="",
                manufacturer="Microchip Technology Inc.",
                product="LUXAFOR FLAG",
            )
        ]

    @pytest.mark.unit
    def test_enumerate_failure_is_transport_error(self, mock_hid):
        mock_hid.enumerate.side_effect = OSError("hidapi unavailable")

        with pytest.raises(TransportError) as exc_info:
            HidTransport.enumerate(0x04D8, 0xF372)
        assert exc_info.value.original_error == "hidapi unavailable"

    @pytest.mark.unit
    def test_open_fails_cleanly_when_enumeration_fails(self, mock_hid):
        mock_hid.enumerate.side_effect = OSError("hidapi unavailable")

        with pytest.raises(TransportError):
            HidTransport.open(0x04D8, 0xF372)
        mock_hid.device.assert_not_called()

    @pytest.mark.unit
    def test_missing_strings_become_empty(self):
        info = HidDeviceInfo.from_hidapi({"path": "/dev/x", "vendor_id": 1, "product_id": 2, "product_string": None})
        assert info.product == ""
        assert info.path == "/dev/x"


class TestOpen:
    """Test opening devices."""

    @pytest.mark.unit
    def test_open_first_match(self, mock_hid, handle):
        transport = HidTransport.open(0x04D8, 0xF372)

        handle.open_path.assert_called_once_with(b"/dev/hidraw3")
        assert transport.path == "/dev/hidraw3"

    @pytest.mark.unit
    def test_open_explicit_path_skips_enumeration(self, mock_hid, handle):
        HidTransport.open(0x04D8, 0xF372, path="/dev/hidraw9")

        mock_hid.enumerate.assert_not_called()
        handle.open_path.assert_called_once_with(b"/dev/hidraw9")

    @pytest.mark.unit
    def test_open_without_devices(self, mock_hid):
        mock_hid.enumerate.return_value = []

        with pytest.raises(DeviceNotFoundError) as exc_info:
            HidTransport.open(0x04D8, 0xF372)
        assert "04D8:F372" in exc_info.value.user_message
        assert "luxafor list" in exc_info.value.recovery_hint

    @pytest.mark.unit
    def test_open_failure(self, mock_hid, handle):
        handle.open_path.side_effect = OSError("open failed")

        with pytest.raises(TransportError) as exc_info:
            HidTransport.open(0x04D8, 0xF372)
        assert exc_info.value.original_error == "open failed"

    @pytest.mark.unit
    def test_open_device_from_config(self, mock_hid, handle):
        config = LuxaforConfig(device_path="/dev/hidraw5")

        device = open_device(config)

        assert isinstance(device, LuxaforDevice)
        assert device.path == "/dev/hidraw5"
        handle.open_path.assert_called_once_with(b"/dev/hidraw5")

    @pytest.mark.unit
    def test_open_device_path_overrides_config(self, mock_hid, handle):
        open_device(LuxaforConfig(device_path="/dev/hidraw5"), path="/dev/hidraw6")
        handle.open_path.assert_called_once_with(b"/dev/hidraw6")


class TestWrite:
    """Test writes and timeouts."""

    @pytest.mark.unit
    def test_write_without_timeout(self, handle):
        transport = HidTransport(handle, "/dev/hidraw3")
        transport.write(b"\x00\x01\xff\xc8\x14\x2a\x00\x00\x00", 0)
        handle.write.assert_called_once_with(b"\x00\x01\xff\xc8\x14\x2a\x00\x00\x00")

    @pytest.mark.unit
    def test_write_with_timeout_completes(self, handle):
        transport = HidTransport(handle)
        transport.write(b"\x00" * 9, 1000)
        handle.write.assert_called_once()
        transport.close()

    @pytest.mark.unit
    def test_write_timeout_expires(self, handle):
        release = threading.Event()

        def stuck_write(data):
            release.wait(5)
            return 9

        handle.write.side_effect = stuck_write
        transport = HidTransport(handle)
        try:
            with pytest.raises(TransportTimeoutError) as exc_info:
                transport.write(b"\x00" * 9, 20)
            assert exc_info.value.timeout_ms == 20
        finally:
            release.set()
            transport.close()

    @pytest.mark.unit
    def test_negative_result_is_error(self, handle):
        handle.write.return_value = -1
        transport = HidTransport(handle)
        with pytest.raises(TransportError):
            transport.write(b"\x00" * 9, 0)

    @pytest.mark.unit
    def test_os_error_is_error(self, handle):
        handle.write.side_effect = OSError("device disconnected")
        transport = HidTransport(handle)
        with pytest.raises(TransportError) as exc_info:
            transport.write(b"\x00" * 9, 0)
        assert "device disconnected" in exc_info.value.technical_message

    @pytest.mark.unit
    def test_error_in_worker_propagates(self, handle):
        handle.write.return_value = -1
        transport = HidTransport(handle)
        with pytest.raises(TransportError):
            transport.write(b"\x00" * 9, 500)
        transport.close()


class TestClose:
    """Test release of the hidapi handle."""

    @pytest.mark.unit
    def test_close_once(self, handle):
        transport = HidTransport(handle)
        transport.close()
        transport.close()
        handle.close.assert_called_once()

    @pytest.mark.unit
    def test_device_closes_transport(self, handle):
        with LuxaforDevice(HidTransport(handle)) as device:
            device.set_color(ALL_LEDS, Color(r=1, g=2, b=3), timeout=0)
        handle.write.assert_called_once_with(bytes([0, 1, 0xFF, 1, 2, 3, 0, 0, 0]))
        handle.close.assert_called_once()


class BlockingHandle:
    """hidapi handle whose writes block until released."""

    def __init__(self):
        self.release = threading.Event()
        self.lock = threading.Lock()
        self.active_writes = 0
        self.peak_writes = 0
        self.written = []
        self.closed_during_write = None

    def write(self, data):
        with self.lock:
            self.active_writes += 1
            self.peak_writes = max(self.peak_writes, self.active_writes)
        self.release.wait(5)
        with self.lock:
            self.active_writes -= 1
            self.written.append(bytes(data))
        return len(data)

    def close(self):
        with self.lock:
            self.closed_during_write = self.active_writes > 0


class TestPendingWrites:
    """A write that timed out is still running on the worker."""

    @pytest.mark.unit
    def test_close_waits_for_timed_out_write(self):
        handle = BlockingHandle()
        device = LuxaforDevice(HidTransport(handle))

        assert device.set_color(ALL_LEDS, Color(r=1, g=2, b=3), timeout=20) is False

        threading.Timer(0.05, handle.release.set).start()
        device.close()

        assert handle.closed_during_write is False
        assert handle.written == [bytes([0, 1, 0xFF, 1, 2, 3, 0, 0, 0])]

    @pytest.mark.unit
    def test_next_write_queues_behind_timed_out_write(self):
        handle = BlockingHandle()
        transport = HidTransport(handle)
        first = b"\x00\x01" + b"\x00" * 7
        second = b"\x00\x06\x08" + b"\x00" * 6

        with pytest.raises(TransportTimeoutError):
            transport.write(first, 20)

        writer = threading.Thread(target=transport.write, args=(second, 0))
        writer.start()
        threading.Timer(0.05, handle.release.set).start()
        writer.join(5)
        transport.close()

        assert handle.peak_writes == 1
        assert handle.written == [first, second]

    @pytest.mark.unit
    def test_write_after_close_is_transport_error(self, handle):
        transport = HidTransport(handle)
        transport.close()
        with pytest.raises(TransportError):
            transport.write(b"\x00" * 9, 0)
        handle.write.assert_not_called()
