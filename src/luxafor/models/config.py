"""Application configuration model and its JSON file."""

import logging
import shutil
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from luxafor.exceptions import ConfigFileInvalidError, config_error_from_validation

logger = logging.getLogger(__name__)

LUXAFOR_VENDOR_ID = 0x04D8
LUXAFOR_PRODUCT_ID = 0xF372


def default_config_path() -> Path:
    """Location of the config file (~/.luxafor/config.json)."""
    return Path.home() / ".luxafor" / "config.json"


def _sibling(path: Path, suffix: str) -> Path:
    return path.with_name(path.name + suffix)


class LuxaforConfig(BaseModel):
    """
    Device selection and dispatch settings.

    Stored as JSON. Saving keeps the previous file as ``config.json.bak``
    and replaces the file in one rename, so a crash mid-save never leaves
    a half-written config behind.
    """

    vendor_id: int = Field(
        default=LUXAFOR_VENDOR_ID, ge=0, le=0xFFFF, description="USB vendor ID of the device"
    )
    product_id: int = Field(
        default=LUXAFOR_PRODUCT_ID, ge=0, le=0xFFFF, description="USB product ID of the device"
    )
    default_timeout_ms: int = Field(
        default=0,
        ge=0,
        description="Write timeout in milliseconds used when none is given (0 = wait indefinitely)",
    )
    device_path: Optional[str] = Field(
        default=None,
        description="HID path of the device to open (None = first matching device)",
    )

    @classmethod
    def load(cls, path: Path) -> "LuxaforConfig":
        """
        Read and validate a config file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigFileInvalidError: If the file is unreadable, empty or not JSON
            ConfigValidationError: If a setting is rejected
        """
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise
        except OSError as e:
            raise ConfigFileInvalidError(str(path), f"cannot read file: {e}") from e

        if not text.strip():
            raise ConfigFileInvalidError(str(path), "file is empty")

        try:
            config = cls.model_validate_json(text)
        except ValidationError as e:
            error = config_error_from_validation(e, str(path))
            logger.error(error.technical_message)
            raise error from e

        logger.debug(f"Loaded config from {path}")
        return config

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "LuxaforConfig":
        """
        Load config from file, or return defaults when there is no file.

        Args:
            path: Path to config file. If None, uses ~/.luxafor/config.json.

        Raises:
            ConfigFileInvalidError: If config file is unreadable or not JSON
            ConfigValidationError: If config values fail validation
        """
        path = path or default_config_path()
        try:
            return cls.load(path)
        except FileNotFoundError:
            logger.info(f"No config at {path}, using defaults")
            return cls()

    def save(self, path: Path | None = None, backup: bool = True) -> None:
        """
        Write the config, keeping the previous file as ``<name>.bak``.

        Raises:
            OSError: If the file cannot be written
        """
        path = path or default_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)

        if backup and path.exists():
            shutil.copy2(path, _sibling(path, ".bak"))

        staging = _sibling(path, ".tmp")
        try:
            staging.write_text(self.model_dump_json(indent=2), encoding="utf-8")
            staging.replace(path)
        except OSError:
            staging.unlink(missing_ok=True)
            raise
        logger.debug(f"Saved config to {path}")
