"""Target-bound view over a device."""

from __future__ import annotations

from typing import TYPE_CHECKING

from luxafor.models import Color, LedTarget

if TYPE_CHECKING:
    from .device import LuxaforDevice


class LedPort:
    """
    A device with one LED target fixed.

    Every call delegates to the device with the bound target, so the
    packet written is byte-identical to calling the device directly.
    The port holds no transport state and must not outlive its device.
    """

    def __init__(self, device: LuxaforDevice, target: LedTarget):
        self._device = device
        self._target = target

    @property
    def target(self) -> LedTarget:
        """The bound LED target."""
        return self._target

    @property
    def device(self) -> LuxaforDevice:
        """The device this port writes through."""
        return self._device

    def set_color(self, color: Color, fade_speed: int = 0, timeout: int = 0) -> bool:
        """Set the bound LEDs to a color, optionally fading."""
        return self._device.set_color(self._target, color, fade_speed=fade_speed, timeout=timeout)

    def blink(self, color: Color, speed: int, repeat: int = 0, timeout: int = 0) -> bool:
        """Blink the bound LEDs."""
        return self._device.blink(self._target, color, speed, repeat=repeat, timeout=timeout)

    def turn_off(self, timeout: int = 0) -> bool:
        """Switch the bound LEDs off."""
        return self._device.turn_off(self._target, timeout=timeout)

    def __repr__(self) -> str:
        return f"LedPort(target={self._target})"
