"""Color model for LED control."""

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from luxafor.exceptions import OutOfRangeError

NAMED_COLORS: dict[str, tuple[int, int, int]] = {
    "off": (0, 0, 0),
    "red": (255, 0, 0),
    "green": (0, 255, 0),
    "blue": (0, 0, 255),
    "yellow": (255, 255, 0),
    "cyan": (0, 255, 255),
    "magenta": (255, 0, 255),
    "white": (255, 255, 255),
}


class Color(BaseModel):
    """Standard 8-bit RGB color model.

    Each channel is written to the device as a single byte, so values
    outside 0-255 are rejected with OutOfRangeError when the color is built.
    The model is frozen so a color can be shared between commands.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(description="Red (0-255)")
    g: int = Field(description="Green (0-255)")
    b: int = Field(description="Blue (0-255)")

    @field_validator("r", "g", "b")
    @classmethod
    def validate_rgb(cls, v: int, info: ValidationInfo) -> int:
        """Ensure RGB values fit in one byte."""
        if not 0 <= v <= 255:
            raise OutOfRangeError(info.field_name, v)
        return v

    @classmethod
    def off(cls) -> "Color":
        """Create off (black) color."""
        return cls(r=0, g=0, b=0)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse '#RRGGBB' or 'RRGGBB'.

        Example:
            >>> Color.from_hex("#C8142A")
            Color(r=200, g=20, b=42)
        """
        digits = value.strip().lstrip("#")
        if len(digits) != 6:
            raise ValueError(f"Expected 6 hex digits, got {value!r}")
        return cls(r=int(digits[0:2], 16), g=int(digits[2:4], 16), b=int(digits[4:6], 16))

    @classmethod
    def parse(cls, value: str) -> "Color":
        """Parse a named color ("red", "off", ...) or a hex string."""
        name = value.strip().lower()
        if name in NAMED_COLORS:
            r, g, b = NAMED_COLORS[name]
            return cls(r=r, g=g, b=b)
        return cls.from_hex(value)

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Convert to CSS hex color string (e.g., '#FF0000')."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"
