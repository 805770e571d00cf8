"""Pytest fixtures for tests."""

import logging
from unittest.mock import Mock

import pytest

from luxafor.devices import LuxaforDevice
from luxafor.models import Color


def to_packet(message: str) -> bytes:
    """Convert '00:01:FF:...' to bytes."""
    return bytes(int(part, 16) for part in message.split(":"))


@pytest.fixture
def transport():
    """Create mock transport recording writes and closes."""
    mock = Mock(spec=["write", "close"])
    mock.write.return_value = None
    mock.close.return_value = None
    return mock


@pytest.fixture
def packet():
    """Convert "00:01:FF:..." strings to bytes."""
    return to_packet


@pytest.fixture
def device(transport):
    """Create a device over the mock transport."""
    return LuxaforDevice(transport, path="/dev/hidraw-test")


@pytest.fixture
def assert_sent(transport):
    """Assert a packet was written to the mock transport a given number of times."""

    def _assert(message: str, call_count: int = 1):
        expected = to_packet(message)
        sent = [c.args[0] for c in transport.write.call_args_list]
        assert sent.count(expected) == call_count, f"sent: {[s.hex(':') for s in sent]}"

    return _assert


@pytest.fixture
def crimson():
    """Color used throughout the set_color examples."""
    return Color(r=0xC8, g=0x14, b=0x2A)


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Point HOME at a temp dir and restore root logging afterwards."""
    monkeypatch.setenv("HOME", str(tmp_path))
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield tmp_path
    for handler in list(root.handlers):
        if handler not in handlers:
            handler.close()
            root.removeHandler(handler)
    root.setLevel(level)
