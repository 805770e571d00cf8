"""Enumerations for device animation codes."""

from enum import Enum


class WaveType(Enum):
    """Wave animation styles understood by the device."""

    SHORT = 1
    LONG = 2
    OVERLAPPING_SHORT = 3
    OVERLAPPING_LONG = 4


class PatternType(Enum):
    """Built-in animation patterns stored on the device."""

    TRAFFIC_LIGHTS = 1
    RANDOM_1 = 2
    RANDOM_2 = 3
    RANDOM_3 = 4
    POLICE = 5
    RANDOM_4 = 6
    RANDOM_5 = 7
    RAINBOW_WAVE = 8
