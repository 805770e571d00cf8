"""Device command implementations."""

import logging
from collections.abc import Callable
from typing import Optional

import click

from luxafor.devices import LuxaforDevice
from luxafor.devices.hid import HidTransport, open_device
from luxafor.exceptions import LuxaforError, format_error_for_display
from luxafor.models import Color, LedTarget, LuxaforConfig, PatternType, WaveType

logger = logging.getLogger(__name__)


class ColorParamType(click.ParamType):
    """Named color ('red') or hex ('#C8142A')."""

    name = "color"

    def convert(self, value, param, ctx):
        if isinstance(value, Color):
            return value
        try:
            return Color.parse(value)
        except (ValueError, LuxaforError) as e:
            self.fail(f"{value!r} is not a valid color: {e}", param, ctx)


class TargetParamType(click.ParamType):
    """'all', 'front', 'back' or an LED index 0-8."""

    name = "target"

    def convert(self, value, param, ctx):
        if isinstance(value, LedTarget):
            return value
        try:
            return LedTarget.parse(value)
        except (ValueError, LuxaforError) as e:
            self.fail(f"{value!r} is not a valid target: {e}", param, ctx)


COLOR = ColorParamType()
TARGET = TargetParamType()

target_option = click.option(
    '--target',
    type=TARGET,
    default="all",
    show_default=True,
    help="LEDs to address: all, front, back or an index 0-8"
)


def _enum_choice(enum_type) -> click.Choice:
    return click.Choice([member.name.lower() for member in enum_type], case_sensitive=False)


def _fail(ctx: click.Context, error: Exception) -> None:
    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)
    click.echo(f"\nFor details, check the log file: {ctx.obj['log_path']}", err=True)
    ctx.exit(1)


def load_config(ctx: click.Context) -> Optional[LuxaforConfig]:
    """Load the config named on the command line (or the default one)."""
    try:
        return LuxaforConfig.load_or_default(ctx.obj.get("config_file"))
    except LuxaforError as e:
        _fail(ctx, e)
        return None


def run_on_device(
    ctx: click.Context, operation: str, action: Callable[[LuxaforDevice, int], bool]
) -> None:
    """
    Open the configured device, run one operation and close it.

    Exits 1 on errors and 2 when the device does not accept the
    command within the timeout.
    """
    config = load_config(ctx)
    timeout = ctx.obj.get("timeout")
    if timeout is None:
        timeout = config.default_timeout_ms

    logger.debug(f"Starting: {operation} (timeout {timeout} ms)")
    try:
        with open_device(config, ctx.obj.get("path")) as device:
            acknowledged = action(device, timeout)
    except LuxaforError as e:
        logger.error(f"Failed to {operation}: {e.technical_message}")
        _fail(ctx, e)
        return

    if not acknowledged:
        click.echo(f"[FAIL] {operation}: not acknowledged within {timeout} ms", err=True)
        ctx.exit(2)
    click.echo(f"[OK] {operation}")


@click.command(name="list")
@click.pass_context
def list_devices(ctx):
    """List connected Luxafor devices."""
    config = load_config(ctx)
    try:
        devices = HidTransport.enumerate(config.vendor_id, config.product_id)
    except LuxaforError as e:
        _fail(ctx, e)
        return

    if not devices:
        click.echo(
            f"No devices found for {config.vendor_id:04X}:{config.product_id:04X}."
        )
        return

    click.echo("Luxafor devices:\n")
    for i, info in enumerate(devices):
        label = " ".join(part for part in (info.manufacturer, info.product) if part) or "unknown"
        serial = f" serial={info.serial_number}" if info.serial_number else ""
        click.echo(f"  [{i}] {info.path}  {label}{serial}")


@click.command()
@click.argument("color_value", metavar="COLOR", type=COLOR)
@target_option
@click.option('--fade', type=click.IntRange(0, 255), default=0, help="Fade speed (0 = switch immediately)")
@click.pass_context
def color(ctx, color_value: Color, target: LedTarget, fade: int):
    """Set LEDs to COLOR, optionally fading."""
    run_on_device(
        ctx,
        f"set {target} to {color_value.to_hex()}",
        lambda device, timeout: device.set_color(target, color_value, fade_speed=fade, timeout=timeout),
    )


@click.command()
@target_option
@click.pass_context
def off(ctx, target: LedTarget):
    """Switch LEDs off."""
    run_on_device(ctx, f"turn off {target}", lambda device, timeout: device.turn_off(target, timeout))


@click.command()
@click.argument("color_value", metavar="COLOR", type=COLOR)
@target_option
@click.option('--speed', '-s', type=click.IntRange(0, 255), required=True, help="Blink speed")
@click.option('--repeat', '-r', type=click.IntRange(0, 255), default=0, help="Repeat count (0 = no limit)")
@click.pass_context
def blink(ctx, color_value: Color, target: LedTarget, speed: int, repeat: int):
    """Blink LEDs in COLOR."""
    run_on_device(
        ctx,
        f"blink {target} in {color_value.to_hex()}",
        lambda device, timeout: device.blink(target, color_value, speed, repeat=repeat, timeout=timeout),
    )


@click.command()
@click.argument("color_value", metavar="COLOR", type=COLOR)
@click.option('--type', 'wave_type', type=_enum_choice(WaveType), default="short", show_default=True)
@click.option('--speed', '-s', type=click.IntRange(0, 255), required=True, help="Wave speed")
@click.option('--repeat', '-r', type=click.IntRange(0, 255), default=0, help="Repeat count")
@click.pass_context
def wave(ctx, color_value: Color, wave_type: str, speed: int, repeat: int):
    """Run a wave animation in COLOR over the whole device."""
    kind = WaveType[wave_type.upper()]
    run_on_device(
        ctx,
        f"{wave_type.lower()} wave in {color_value.to_hex()}",
        lambda device, timeout: device.wave(kind, color_value, speed, repeat, timeout=timeout),
    )


@click.command()
@click.argument("name", type=_enum_choice(PatternType))
@click.option('--repeat', '-r', type=click.IntRange(0, 255), default=0, help="Repeat count")
@click.pass_context
def pattern(ctx, name: str, repeat: int):
    """Run a built-in pattern (e.g. police, rainbow_wave)."""
    kind = PatternType[name.upper()]
    run_on_device(
        ctx,
        f"pattern {name.lower()}",
        lambda device, timeout: device.carry_out_pattern(kind, repeat=repeat, timeout=timeout),
    )
