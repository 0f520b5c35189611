"""Configuration file management for finances."""

import logging
import os
import tomllib
from datetime import date
from pathlib import Path
from typing import Any

import tomli_w

logger = logging.getLogger(__name__)

PROJECTION_KEYS = (
    "start_year",
    "duration",
    "principal",
    "profit",
    "interest_rate",
    "capital_gains_tax_rate",
)


def default_settings() -> dict[str, Any]:
    """Built-in projection defaults, starting from the current year."""
    return {
        "start_year": date.today().year,
        "duration": 40,
        "principal": 10000,
        "profit": 3000,
        "interest_rate": 10,
        "capital_gains_tax_rate": 25,
    }


def get_config_path() -> Path:
    """Return where the config lives: $XDG_CONFIG_HOME/finances/config.toml, else ~/.config."""
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / "finances" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    save_config({"projection": default_settings()}, config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Read the TOML config file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        OSError: If the file is missing or cannot be read.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
        UnicodeDecodeError: If the file is not UTF-8.
    """
    path = config_path or get_config_path()
    return tomllib.loads(path.read_bytes().decode("utf-8"))


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Write the config as TOML, readable by the owner only.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(tomli_w.dumps(config), encoding="utf-8")
    path.chmod(0o600)


def get_projection_settings(config_path: Path | None = None) -> dict[str, Any]:
    """Get projection settings, falling back to defaults for anything unset.

    A missing config file means all defaults. Unknown keys in the
    [projection] table are ignored.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Dictionary with every key in PROJECTION_KEYS.
    """
    settings = default_settings()

    try:
        config = load_config(config_path)
    except FileNotFoundError:
        logger.debug("No config file found, using defaults")
        return settings

    projection = config.get("projection", {})
    if not isinstance(projection, dict):
        return settings

    for key in PROJECTION_KEYS:
        if key in projection:
            settings[key] = projection[key]

    return settings
