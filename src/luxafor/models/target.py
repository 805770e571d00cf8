"""LED addressing.

Every command that affects a subset of the device's LEDs carries one
address byte. The device understands three group addresses plus the
index of a single LED::

    0xFF        every LED
    0x41        all LEDs on the front side
    0x42        all LEDs on the back side
    0x00-0x08   a single LED by index
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from luxafor.exceptions import OutOfRangeError

ALL_LEDS_ADDRESS = 0xFF
FRONT_SIDE_ADDRESS = 0x41
BACK_SIDE_ADDRESS = 0x42

MIN_LED_INDEX = 0
MAX_LED_INDEX = 8

_GROUP_NAMES = {
    ALL_LEDS_ADDRESS: "all",
    FRONT_SIDE_ADDRESS: "front",
    BACK_SIDE_ADDRESS: "back",
}


class LedTarget(BaseModel):
    """Which LED(s) a command affects, resolved to a single address byte."""

    model_config = ConfigDict(frozen=True)

    address: int = Field(description="Address byte sent on the wire")

    @field_validator("address")
    @classmethod
    def validate_address(cls, v: int) -> int:
        """Accept the group addresses or a single LED index."""
        if v in _GROUP_NAMES:
            return v
        if not MIN_LED_INDEX <= v <= MAX_LED_INDEX:
            raise OutOfRangeError("index", v, MIN_LED_INDEX, MAX_LED_INDEX)
        return v

    @classmethod
    def all_leds(cls) -> "LedTarget":
        """Target every LED on the device."""
        return cls(address=ALL_LEDS_ADDRESS)

    @classmethod
    def front_side(cls) -> "LedTarget":
        """Target all front-side LEDs."""
        return cls(address=FRONT_SIDE_ADDRESS)

    @classmethod
    def back_side(cls) -> "LedTarget":
        """Target all back-side LEDs."""
        return cls(address=BACK_SIDE_ADDRESS)

    @classmethod
    def of_index(cls, index: int) -> "LedTarget":
        """
        Target a single LED.

        Args:
            index: LED index (0-8)

        Raises:
            OutOfRangeError: If index is outside 0-8
        """
        if not MIN_LED_INDEX <= index <= MAX_LED_INDEX:
            raise OutOfRangeError("index", index, MIN_LED_INDEX, MAX_LED_INDEX)
        return cls(address=index)

    @classmethod
    def parse(cls, value: str) -> "LedTarget":
        """Parse 'all', 'front', 'back' or an LED index."""
        name = value.strip().lower()
        for address, group in _GROUP_NAMES.items():
            if name == group:
                return cls(address=address)
        return cls.of_index(int(name))

    @property
    def is_single(self) -> bool:
        """True when this addresses exactly one LED."""
        return self.address not in _GROUP_NAMES

    @property
    def index(self) -> int | None:
        """LED index for single targets, None for groups."""
        return self.address if self.is_single else None

    def to_address_byte(self) -> int:
        """Address byte for the wire."""
        return self.address

    def __str__(self) -> str:
        return _GROUP_NAMES.get(self.address, f"led {self.address}")


ALL_LEDS = LedTarget.all_leds()
FRONT_SIDE = LedTarget.front_side()
BACK_SIDE = LedTarget.back_side()
