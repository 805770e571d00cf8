"""Value types for the Luxafor device."""

from .color import Color
from .config import LuxaforConfig
from .enums import PatternType, WaveType
from .target import ALL_LEDS, BACK_SIDE, FRONT_SIDE, LedTarget

__all__ = [
    "ALL_LEDS",
    "BACK_SIDE",
    "FRONT_SIDE",
    "Color",
    "LedTarget",
    "LuxaforConfig",
    "PatternType",
    "WaveType",
]
