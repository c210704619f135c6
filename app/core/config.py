"""
Application configuration loaded from TOML files.
"""
import logging
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from app.utils.constants import ConfigFile

CONFIG_DIR = Path(__file__).resolve().parent.parent / "configs"

logger = logging.getLogger(__name__)

__all__ = ["CONFIG_DIR", "Config", "ConfigFile", "get_config"]


class Config:
    """
    Parsed configuration file.

    The raw TOML tables are exposed as ``data`` so callers can pick the
    section they need, e.g. ``config.data["db"]``.
    """

    def __init__(self, config_file: str, data: dict[str, Any]):
        self.config_file = config_file
        self.data = data

    def section(self, name: str) -> dict[str, Any]:
        """Return a config table, or an empty dict when it is absent."""
        return self.data.get(name, {})

    def __repr__(self):
        return f"<Config: {self.config_file}>"


@lru_cache
def get_config(config_file: str) -> Config:
    """
    Load and cache a configuration file from the configs directory.

    Args:
        config_file: Configuration file name (e.g., "development.toml")

    Returns:
        Config instance

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = CONFIG_DIR / config_file
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "rb") as f:
        data = tomllib.load(f)

    logger.debug(f"Loaded configuration from {path}")
    return Config(config_file, data)
