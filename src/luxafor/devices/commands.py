"""
Command packets for Luxafor devices.

Packet Layout
=============

Every command is a fixed 9-byte HID output report::

    [0x00] [code] [7 bytes of command-specific fields, zero padded]
      │      │
      │      └─ Command code (what kind of command this is)
      └─ Report marker, constant for every command

Command Codes
-------------

=========  =====  ==========================================================
Kind       Code   Bytes 2..8
=========  =====  ==========================================================
Static     0x01   target, R, G, B, 0, 0, 0
Fade       0x02   target, R, G, B, fade speed, 0, 0
Blink      0x03   target, R, G, B, blink speed, 0, repeat
Wave       0x04   wave type, R, G, B, 0, repeat, speed
Pattern    0x06   pattern, repeat, 0, 0, 0, 0, 0
=========  =====  ==========================================================

Wave does not follow the other layouts: the repeat count comes before
the speed, and the speed is the last byte of the packet.

Example
-------

Fading LED 5 to (200, 20, 42) at speed 64::

    FadeColorCommand(target=LedTarget.of_index(5),
                     color=Color(r=0xC8, g=0x14, b=0x2A),
                     speed=64).to_bytes()

    00 02 05 C8 14 2A 40 00 00
    │  │  │  └──┬───┘ │
    │  │  │     │     └─ fade speed
    │  │  │     └─ R, G, B
    │  │  └─ target address (LED 5)
    │  └─ fade command
    └─ report marker

Validation
----------

Commands are frozen Pydantic models. Speeds and repeat counts are
checked against the byte range when the command is built and raise
OutOfRangeError; ``to_bytes()`` itself never fails.

Custom commands can be sent through ``LuxaforDevice.send_command`` by
subclassing Command, setting ``code`` and implementing ``payload()``.
"""

from abc import ABC, abstractmethod
from typing import Annotated, ClassVar

from pydantic import AfterValidator, BaseModel, ConfigDict, ValidationInfo, model_validator

from luxafor.exceptions import OutOfRangeError
from luxafor.models import Color, LedTarget, PatternType, WaveType

PACKET_LENGTH = 9
REPORT_MARKER = 0x00
MAX_PAYLOAD_LENGTH = PACKET_LENGTH - 2

STATIC_COLOR_CODE = 0x01
FADE_COLOR_CODE = 0x02
BLINK_CODE = 0x03
WAVE_CODE = 0x04
PATTERN_CODE = 0x06


def _check_byte(value: int, info: ValidationInfo) -> int:
    if not 0 <= value <= 255:
        raise OutOfRangeError(info.field_name or "value", value)
    return value


Byte = Annotated[int, AfterValidator(_check_byte)]


def format_packet(data: bytes) -> str:
    """Render a packet as colon-separated upper-case hex ('00:01:FF:...')."""
    return ":".join(f"{b:02X}" for b in data)


class Command(BaseModel, ABC):
    """Base class for all device commands.

    Subclasses set ``code`` and implement ``payload()``. The payload is
    checked when the command is built: at most 7 bytes, each 0-255.
    """

    model_config = ConfigDict(frozen=True)

    code: ClassVar[int]

    @abstractmethod
    def payload(self) -> tuple[int, ...]:
        """Command-specific bytes that follow the command code."""

    @model_validator(mode="after")
    def check_payload_fits(self) -> "Command":
        fields = tuple(self.payload())
        if len(fields) > MAX_PAYLOAD_LENGTH:
            raise ValueError(
                f"{type(self).__name__} payload is {len(fields)} bytes, "
                f"at most {MAX_PAYLOAD_LENGTH} fit in a {PACKET_LENGTH}-byte packet"
            )
        for position, value in enumerate(fields):
            if not 0 <= value <= 255:
                raise OutOfRangeError(f"payload[{position}]", value)
        return self

    def to_bytes(self) -> bytes:
        """Serialize to the fixed-length packet written to the device."""
        fields = tuple(self.payload())
        packet = bytearray(PACKET_LENGTH)
        packet[0] = REPORT_MARKER
        packet[1] = self.code
        packet[2:2 + len(fields)] = fields
        return bytes(packet)

    def to_hex(self) -> str:
        """Packet as '00:01:FF:...' for logs."""
        return format_packet(self.to_bytes())


class StaticColorCommand(Command):
    """Switch the target LEDs to a color immediately."""

    code: ClassVar[int] = STATIC_COLOR_CODE

    target: LedTarget
    color: Color

    def payload(self) -> tuple[int, ...]:
        return (self.target.address, *self.color.to_rgb_tuple())


class FadeColorCommand(Command):
    """Fade the target LEDs to a color."""

    code: ClassVar[int] = FADE_COLOR_CODE

    target: LedTarget
    color: Color
    speed: Byte

    def payload(self) -> tuple[int, ...]:
        return (self.target.address, *self.color.to_rgb_tuple(), self.speed)


class BlinkCommand(Command):
    """Blink the target LEDs.

    A repeat count of 0 sends no explicit repeat limit.
    """

    code: ClassVar[int] = BLINK_CODE

    target: LedTarget
    color: Color
    speed: Byte
    repeat: Byte = 0

    def payload(self) -> tuple[int, ...]:
        return (self.target.address, *self.color.to_rgb_tuple(), self.speed, 0, self.repeat)


class WaveCommand(Command):
    """Run a wave animation across the whole device."""

    code: ClassVar[int] = WAVE_CODE

    wave_type: WaveType
    color: Color
    speed: Byte
    repeat: Byte = 0

    def payload(self) -> tuple[int, ...]:
        # repeat before speed, unlike blink
        return (self.wave_type.value, *self.color.to_rgb_tuple(), 0, self.repeat, self.speed)


class PatternCommand(Command):
    """Run one of the patterns built into the device."""

    code: ClassVar[int] = PATTERN_CODE

    pattern: PatternType
    repeat: Byte = 0

    def payload(self) -> tuple[int, ...]:
        return (self.pattern.value, self.repeat)
