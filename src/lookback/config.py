"""Configuration management for Look Back."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

LOOKBACK_HOME = Path(os.environ.get("LOOKBACK_HOME", Path.home() / "lookback"))
CONFIG_FILE = LOOKBACK_HOME / "config" / "lookback.conf"
DATA_DIR = LOOKBACK_HOME / "data"
DATA_FILE_NAME = "actions.json"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Look Back configuration."""

    data_file: str = ""
    image_quality: int = 80
    image_max_size: int = 2048
    log_level: str = "WARNING"

    @property
    def data_path(self) -> Path:
        """Backing file for the action store."""
        if self.data_file:
            return Path(self.data_file).expanduser()
        return DATA_DIR / DATA_FILE_NAME


def _unquote(value: str) -> str:
    # Handle quoted values with inline comments: "value" # comment
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _parse_int(key: str, value: str, default: int, low: int, high: int) -> int:
    try:
        parsed = int(value)
    except ValueError:
        logger.warning(f"Invalid {key.upper()} value {value!r}, using {default}")
        return default
    if not low <= parsed <= high:
        logger.warning(f"{key.upper()} must be between {low} and {high}, using {default}")
        return default
    return parsed


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from lookback.conf file."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if not config_file.exists():
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "data_file":
                config.data_file = value
            case "image_quality":
                config.image_quality = _parse_int(key, value, config.image_quality, 1, 95)
            case "image_max_size":
                config.image_max_size = _parse_int(key, value, config.image_max_size, 16, 16384)
            case "log_level":
                level = value.upper()
                if level in LOG_LEVELS:
                    config.log_level = level
                else:
                    logger.warning(f"Unknown LOG_LEVEL {value!r}, using {config.log_level}")

    return config
