"""Config command implementations."""

import json

import click
from pydantic import ValidationError

from luxafor.exceptions import LuxaforError, config_error_from_validation, format_error_for_display
from luxafor.models import LuxaforConfig
from luxafor.models.config import default_config_path


def _config_path(ctx):
    return ctx.obj.get("config_file") or default_config_path()


def _parse_value(raw: str):
    # Accept JSON literals (numbers, null, hex ints) and fall back to plain strings
    if raw.lower().startswith("0x"):
        return int(raw, 16)
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


@click.group(name="config")
def config():
    """Show or change luxafor settings."""
    pass


@config.command(name="show")
@click.pass_context
def show_config(ctx):
    """Display the current configuration."""
    path = _config_path(ctx)
    try:
        current = LuxaforConfig.load_or_default(path)
    except LuxaforError as e:
        message, hint = format_error_for_display(e)
        click.echo(f"ERROR: {message}", err=True)
        if hint:
            click.echo(f"\n{hint}", err=True)
        ctx.exit(1)
        return

    click.echo(f"Config file: {path}\n")
    for field, value in current.model_dump().items():
        if field in ("vendor_id", "product_id"):
            value = f"0x{value:04X}"
        click.echo(f"  {field}: {value}")


@config.command(name="path")
@click.pass_context
def config_path(ctx):
    """Print the config file location."""
    click.echo(str(_config_path(ctx)))


@config.command(name="set")
@click.argument("field")
@click.argument("value")
@click.pass_context
def set_config(ctx, field: str, value: str):
    """Set FIELD to VALUE and save."""
    path = _config_path(ctx)
    if field not in LuxaforConfig.model_fields:
        valid = ", ".join(LuxaforConfig.model_fields)
        click.echo(f"ERROR: Unknown field '{field}'. Valid fields: {valid}", err=True)
        ctx.exit(1)
        return

    try:
        current = LuxaforConfig.load_or_default(path)
        data = current.model_dump()
        data[field] = _parse_value(value)
        updated = LuxaforConfig.model_validate(data)
    except ValidationError as e:
        click.echo(f"ERROR: {config_error_from_validation(e, str(path)).user_message}", err=True)
        ctx.exit(1)
        return
    except (LuxaforError, ValueError) as e:
        click.echo(f"ERROR: {format_error_for_display(e)[0]}", err=True)
        ctx.exit(1)
        return

    updated.save(path)
    click.echo(f"[OK] {field} = {getattr(updated, field)}")


@config.command(name="reset")
@click.confirmation_option(prompt="Reset configuration to defaults?")
@click.pass_context
def reset_config(ctx):
    """Reset configuration to defaults."""
    path = _config_path(ctx)
    LuxaforConfig().save(path)
    click.echo(f"[OK] Configuration reset ({path})")
