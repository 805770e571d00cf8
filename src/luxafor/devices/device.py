"""Luxafor device: builds commands and dispatches them through a transport."""

from __future__ import annotations

import logging
import threading
from typing import Optional

from luxafor.exceptions import TransportTimeoutError, UseAfterDisposeError
from luxafor.models import ALL_LEDS, BACK_SIDE, FRONT_SIDE, Color, LedTarget, PatternType, WaveType
from .commands import (
    BlinkCommand,
    Command,
    FadeColorCommand,
    PatternCommand,
    StaticColorCommand,
    WaveCommand,
    format_packet,
)
from .port import LedPort
from .protocols import Transport

logger = logging.getLogger(__name__)


class LuxaforDevice:
    """
    A Luxafor device bound to an open transport.

    The device owns the transport: it is closed exactly once, by close()
    or when leaving a ``with`` block. Every high-level operation builds a
    Command and funnels it through send_command().

    Sends are serialized with a lock, so at most one write is in flight
    per device. close() takes the same lock and therefore waits for an
    in-flight send to finish.

    Example:
        ```python
        with LuxaforDevice(transport) as device:
            device.set_color(LedTarget.all_leds(), Color(r=200, g=20, b=42))
            device.front_leds.blink(Color.parse("red"), speed=64, repeat=3)
        ```
    """

    def __init__(self, transport: Transport, path: Optional[str] = None):
        """
        Initialize device.

        Args:
            transport: Open transport; ownership passes to the device
            path: Device path reported for diagnostics (optional)
        """
        self._transport = transport
        self._path = path
        self._lock = threading.Lock()
        self._closed = False

    @property
    def path(self) -> Optional[str]:
        """Path of the underlying device, if known."""
        return self._path

    @property
    def is_closed(self) -> bool:
        """True once the transport has been released."""
        return self._closed

    def send_command(self, command: Command, timeout: int = 0) -> bool:
        """
        Low-level method sending any command to the device.

        Subclass Command to send custom commands through this method.

        Args:
            command: Command to send
            timeout: Milliseconds to wait for the device to accept the
                     packet (0 = wait indefinitely)

        Returns:
            True if the packet was written, False if the timeout elapsed first

        Raises:
            UseAfterDisposeError: If the device has been closed
            TransportError: If the transport failed to write (not retried)
        """
        if timeout < 0:
            raise ValueError(f"timeout must be >= 0 milliseconds, got {timeout}")

        packet = command.to_bytes()

        with self._lock:
            if self._closed:
                raise UseAfterDisposeError(f"send {type(command).__name__}")

            try:
                self._transport.write(packet, timeout)
            except TransportTimeoutError:
                logger.warning(
                    f"{type(command).__name__} not acknowledged within {timeout} ms: "
                    f"{format_packet(packet)}"
                )
                return False

        logger.debug(f"Sent {type(command).__name__}: {format_packet(packet)}")
        return True

    def set_color(
        self, target: LedTarget, color: Color, fade_speed: int = 0, timeout: int = 0
    ) -> bool:
        """
        Set the target LEDs to a color.

        Args:
            target: LEDs to change
            color: New color
            fade_speed: 0 switches immediately, anything else fades at that speed
            timeout: Write timeout in milliseconds (0 = wait indefinitely)
        """
        if fade_speed == 0:
            command: Command = StaticColorCommand(target=target, color=color)
        else:
            command = FadeColorCommand(target=target, color=color, speed=fade_speed)
        return self.send_command(command, timeout)

    def blink(
        self, target: LedTarget, color: Color, speed: int, repeat: int = 0, timeout: int = 0
    ) -> bool:
        """
        Blink the target LEDs.

        Args:
            target: LEDs to blink
            color: Blink color
            speed: Blink speed (0-255)
            repeat: Repeat count (0 = no explicit limit)
            timeout: Write timeout in milliseconds (0 = wait indefinitely)
        """
        command = BlinkCommand(target=target, color=color, speed=speed, repeat=repeat)
        return self.send_command(command, timeout)

    def wave(
        self, wave_type: WaveType, color: Color, speed: int, repeat: int, timeout: int = 0
    ) -> bool:
        """Run a wave animation over the whole device."""
        command = WaveCommand(wave_type=wave_type, color=color, speed=speed, repeat=repeat)
        return self.send_command(command, timeout)

    def carry_out_pattern(self, pattern: PatternType, repeat: int = 0, timeout: int = 0) -> bool:
        """Run one of the device's built-in patterns."""
        return self.send_command(PatternCommand(pattern=pattern, repeat=repeat), timeout)

    def turn_off(self, target: LedTarget = ALL_LEDS, timeout: int = 0) -> bool:
        """Switch the target LEDs off."""
        return self.set_color(target, Color.off(), timeout=timeout)

    @property
    def all_leds(self) -> LedPort:
        """Port addressing every LED."""
        return LedPort(self, ALL_LEDS)

    @property
    def front_leds(self) -> LedPort:
        """Port addressing all front-side LEDs."""
        return LedPort(self, FRONT_SIDE)

    @property
    def back_leds(self) -> LedPort:
        """Port addressing all back-side LEDs."""
        return LedPort(self, BACK_SIDE)

    def __getitem__(self, index: int) -> LedPort:
        """Port addressing a single LED (raises OutOfRangeError outside 0-8)."""
        return LedPort(self, LedTarget.of_index(index))

    def close(self) -> None:
        """Release the transport. Safe to call more than once."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._transport.close()

        logger.info(f"Closed Luxafor device{f' ({self._path})' if self._path else ''}")

    dispose = close

    def __enter__(self) -> LuxaforDevice:
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"LuxaforDevice(path={self._path!r}, {state})"
