"""Configuration management for Diary."""

import getpass
import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DIARY_HOME = Path(os.environ.get("DIARY_HOME", Path.home() / "diary"))
CONFIG_FILE = DIARY_HOME / "config" / "diary.conf"
DATA_DIR = DIARY_HOME / "data"


def default_owner() -> str:
    """Login name of the current OS user."""
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "owner"


@dataclass
class Config:
    """Diary configuration."""

    data_dir: str = ""
    # Identity the host attaches to every command submitted from this machine
    owner: str = ""
    min_secret_length: int = 8
    poll_interval: int = 5  # seconds
    log_level: str = "INFO"

    @property
    def data_path(self) -> Path:
        if self.data_dir:
            return Path(self.data_dir).expanduser()
        return DATA_DIR

    @property
    def caller(self) -> str:
        return self.owner or default_owner()


def _parse_int(key: str, value: str, fallback: int) -> int:
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid integer for {key.upper()}: {value!r}, using {fallback}")
        return fallback


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from diary.conf file."""
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
        value = value.strip()

        # Handle quoted values with inline comments: "value" # comment
        if value.startswith('"') or value.startswith("'"):
            quote = value[0]
            end_quote = value.find(quote, 1)
            value = value[1:end_quote] if end_quote != -1 else value[1:]
        elif "#" in value:
            # Unquoted: strip inline comments
            value = value.split("#")[0].strip()

        match key:
            case "data_dir":
                config.data_dir = value
            case "owner":
                config.owner = value
            case "min_secret_length":
                config.min_secret_length = _parse_int(key, value, config.min_secret_length)
            case "poll_interval":
                config.poll_interval = _parse_int(key, value, config.poll_interval)
            case "log_level":
                config.log_level = value.upper()
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config
