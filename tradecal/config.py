"""Configuration file handling for TradeCal.

Settings live in ``~/.config/tradecal/config.toml``. The path can be
overridden with the TRADECAL_CONFIG environment variable or the CLI
``--config`` option.
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import toml

logger = logging.getLogger(__name__)

DEFAULT_CSV_PATH = "output.csv"
DEFAULT_YEAR = 2025


def default_config_path() -> Path:
    """Get the config path, honouring TRADECAL_CONFIG."""
    override = os.environ.get("TRADECAL_CONFIG")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "tradecal" / "config.toml"


def load_config(path: Optional[Path] = None) -> Optional[dict]:
    """Load configuration.

    Returns:
        Config dict, or None if the file is missing or invalid.
    """
    config_path = Path(path) if path else default_config_path()

    if not config_path.exists():
        return None

    try:
        return toml.load(config_path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning("Ignoring invalid config %s: %s", config_path, e)
        return None


def get_setting(config: Optional[dict], section: str, key: str, default: Any = None) -> Any:
    """Read ``[section].key`` from a config dict with a fallback."""
    if not config:
        return default
    table = config.get(section, {})
    if not isinstance(table, dict):
        logger.warning("Ignoring config section [%s]: expected a table, got %r", section, table)
        return default
    return table.get(key, default)


def create_template_config(path: Optional[Path] = None) -> Path:
    """Create a template configuration file."""
    config_path = Path(path) if path else default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    template = {
        "data": {
            "csv_path": DEFAULT_CSV_PATH,
        },
        "calendar": {
            "year": DEFAULT_YEAR,
            "default_month": 1,
        },
        "holidays": {
            # Extra holiday tables, keyed by year; merged over built-in ones
            "2026": {
                "2026-01-01": "New Year's Day",
                "2026-12-25": "Christmas Day",
            },
        },
        "logging": {
            "level": "WARNING",
        },
    }

    with open(config_path, "w") as f:
        toml.dump(template, f)

    return config_path
