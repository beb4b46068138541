"""Configuration loading for pricewatch.

Settings live in ``~/.config/pricewatch/config.toml``. Every key is
optional; a missing file means all defaults.
"""

import copy
import math
from pathlib import Path
from typing import Optional

import toml

from pricewatch.fetchers.coingecko import DEFAULT_BASE_URL

CONFIG_DIR = Path.home() / ".config" / "pricewatch"
CONFIG_PATH = CONFIG_DIR / "config.toml"

DEFAULT_CONFIG = {
    "coingecko": {
        "base_url": DEFAULT_BASE_URL,
        "timeout": 0,  # 0 means no timeout
    },
    "watch": {
        "interval": 30,
    },
}


class ConfigError(Exception):
    """Raised when the config file cannot be read or has bad values."""


def load_config(path: Optional[Path] = None) -> dict:
    """Load configuration merged over the defaults.

    Args:
        path: Config file to read. Defaults to CONFIG_PATH.

    Returns:
        Config dict with every section from DEFAULT_CONFIG present.

    Raises:
        ConfigError: If the file exists but is not valid TOML.
    """
    config_path = path or CONFIG_PATH
    config = copy.deepcopy(DEFAULT_CONFIG)

    if not config_path.exists():
        return config

    try:
        loaded = toml.load(config_path)
    except (toml.TomlDecodeError, OSError) as e:
        raise ConfigError(f"Could not read {config_path}: {e}") from e

    for section, values in loaded.items():
        if isinstance(values, dict) and section in config:
            config[section].update(values)
        else:
            config[section] = values

    # Fail on bad values at load time rather than mid-session
    get_base_url(config)
    get_timeout(config)
    get_interval(config)

    return config


def create_template_config(path: Optional[Path] = None) -> Path:
    """Write the default configuration to disk.

    Returns:
        Path of the written file.
    """
    config_path = path or CONFIG_PATH
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        toml.dump(DEFAULT_CONFIG, f)

    return config_path


def get_timeout(config: dict) -> Optional[float]:
    """Request timeout in seconds, or None for no timeout."""
    timeout = _number(config, "coingecko", "timeout")
    if not math.isfinite(timeout) or timeout < 0:
        raise ConfigError("coingecko.timeout must be a non-negative number")
    return timeout or None


def get_interval(config: dict) -> float:
    """Default polling interval in seconds."""
    interval = _number(config, "watch", "interval")
    if not math.isfinite(interval) or interval <= 0:
        raise ConfigError("watch.interval must be positive")
    return interval


def get_base_url(config: dict) -> str:
    """CoinGecko API root URL.

    Args:
        config: Config dict from load_config.

    Returns:
        The configured base URL.

    Raises:
        ConfigError: If the value is not a non-empty string.
    """
    base_url = _section(config, "coingecko").get("base_url", DEFAULT_BASE_URL)
    if not isinstance(base_url, str) or not base_url:
        raise ConfigError("coingecko.base_url must be a non-empty string")
    return base_url


def _section(config: dict, section: str) -> dict:
    values = config.get(section, {})
    if not isinstance(values, dict):
        raise ConfigError(f"[{section}] must be a table")
    return values


def _number(config: dict, section: str, key: str) -> float:
    value = _section(config, section).get(key, DEFAULT_CONFIG[section][key])
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{section}.{key} must be a number")
    return float(value)
