"""Luxafor device, ports and command encoding."""

from .commands import (
    PACKET_LENGTH,
    BlinkCommand,
    Command,
    FadeColorCommand,
    PatternCommand,
    StaticColorCommand,
    WaveCommand,
)
from .device import LuxaforDevice
from .port import LedPort
from .protocols import Transport

__all__ = [
    "PACKET_LENGTH",
    "BlinkCommand",
    "Command",
    "FadeColorCommand",
    "LedPort",
    "LuxaforDevice",
    "PatternCommand",
    "StaticColorCommand",
    "Transport",
    "WaveCommand",
]
