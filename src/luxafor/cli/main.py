"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from luxafor import __version__

from .commands import blink, color, config, list_devices, off, pattern, wave

logger = logging.getLogger(__name__)


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Where logs go for the given flags."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "luxafor-debug.log"
    return Path.home() / ".luxafor" / "logs" / "luxafor.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, log DEBUG to ./luxafor-debug.log
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)

    Returns:
        Path of the log file
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Explicit log level wins when logging to a custom file
    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = resolve_log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="luxafor")
@click.option(
    '--config-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.luxafor/config.json)'
)
@click.option(
    '--path',
    '-p',
    type=str,
    default=None,
    help='HID path of the device to use (default: first matching device)'
)
@click.option(
    '--timeout',
    '-t',
    type=click.IntRange(min=0),
    default=None,
    help='Write timeout in milliseconds, 0 waits indefinitely (default: from config)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./luxafor-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    config_file: Optional[Path],
    path: Optional[str],
    timeout: Optional[int],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Luxafor - control Luxafor LED notification lights.

    \b
    Examples:
      # Everything red
      luxafor color red

    \b
      # Fade LED 3 to a hex color
      luxafor color '#C8142A' --target 3 --fade 64

    \b
      # Blink the front side three times
      luxafor blink red --speed 64 --repeat 3 --target front

    \b
      # Built-in pattern
      luxafor pattern rainbow_wave --repeat 2

    \b
      # List connected devices
      luxafor list
    """
    log_path = setup_logging(verbose, debug, log_file, log_level)

    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config_file
    ctx.obj["path"] = path
    ctx.obj["timeout"] = timeout
    ctx.obj["log_path"] = log_path


cli.add_command(list_devices)
cli.add_command(color)
cli.add_command(off)
cli.add_command(blink)
cli.add_command(wave)
cli.add_command(pattern)
cli.add_command(config)

if __name__ == "__main__":
    cli()
