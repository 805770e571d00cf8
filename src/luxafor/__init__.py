"""Luxafor: command encoding and dispatch for Luxafor LED notification devices."""

__version__ = "0.1.0"

from .devices import LedPort, LuxaforDevice, Transport
from .devices.commands import (
    BlinkCommand,
    Command,
    FadeColorCommand,
    PatternCommand,
    StaticColorCommand,
    WaveCommand,
)
from .exceptions import (
    LuxaforError,
    OutOfRangeError,
    TransportError,
    TransportTimeoutError,
    UseAfterDisposeError,
)
from .models import ALL_LEDS, BACK_SIDE, FRONT_SIDE, Color, LedTarget, PatternType, WaveType

__all__ = [
    # Models
    "ALL_LEDS",
    "BACK_SIDE",
    "FRONT_SIDE",
    "Color",
    "LedTarget",
    "PatternType",
    "WaveType",
    # Commands
    "BlinkCommand",
    "Command",
    "FadeColorCommand",
    "PatternCommand",
    "StaticColorCommand",
    "WaveCommand",
    # Device
    "LedPort",
    "LuxaforDevice",
    "Transport",
    # Errors
    "LuxaforError",
    "OutOfRangeError",
    "TransportError",
    "TransportTimeoutError",
    "UseAfterDisposeError",
]
