"""
Bridge settings for the OpenClaw token bridge.

The host shell may hand the bridge a small YAML settings file to change log
verbosity. The location of the OpenClaw configuration itself is fixed and is
not a setting.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


logger = logging.getLogger(__name__)

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


class SettingsError(Exception):
    """Raised when bridge settings cannot be loaded or validated."""
    pass


class BridgeSettings(BaseModel):
    """
    Settings for the token bridge.

    Attributes:
        log_level: Level applied to the package logger
    """

    model_config = ConfigDict(extra='forbid', frozen=True)

    log_level: str = Field("WARNING", description="Package log level")

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v) -> str:
        """Normalize and validate the log level name."""
        if isinstance(v, str) and v.upper() in LOG_LEVELS:
            return v.upper()
        raise ValueError(f"Invalid log level: {v}")


def load_settings(settings_path: Optional[Union[str, Path]] = None) -> BridgeSettings:
    """
    Load bridge settings from a YAML file, or return defaults.

    Args:
        settings_path: Path to a YAML settings file. If None, defaults are used.

    Returns:
        Validated BridgeSettings

    Raises:
        SettingsError: If the file cannot be read, is not valid YAML, is not a
            mapping, or contains invalid values
    """
    if settings_path is None:
        return BridgeSettings()

    settings_path = Path(settings_path)
    try:
        with open(settings_path, 'r', encoding='utf-8') as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SettingsError(f"Cannot read settings file {settings_path}: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid YAML syntax in {settings_path}: {e}") from e

    if data is None:
        logger.warning(f"Settings file is empty: {settings_path}")
        return BridgeSettings()

    if not isinstance(data, dict):
        raise SettingsError(f"Settings file must contain a YAML object, got {type(data).__name__}")

    try:
        settings = BridgeSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Settings validation failed: {e}") from e

    logger.info(f"Settings loaded from {settings_path}")
    return settings


def apply_logging(settings: BridgeSettings) -> None:
    """Set the package logger level from settings."""
    logging.getLogger('clawtoken').setLevel(settings.log_level)
