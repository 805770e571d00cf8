"""CLI commands for luxafor."""

from .config import config
from .device import blink, color, list_devices, off, pattern, wave

__all__ = ["blink", "color", "config", "list_devices", "off", "pattern", "wave"]
