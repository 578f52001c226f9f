"""Configuration file management for fintrack."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from fintrack.logging_setup import get_logger

logger = get_logger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "fintrack" / "config.toml"


def get_default_data_path() -> Path:
    """Get the default transactions data file path."""
    return Path.home() / ".fintrack" / "transactions.json"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    default_config: dict[str, Any] = {
        "storage": {"data_file": str(get_default_data_path())},
        "logging": {"level": DEFAULT_LOG_LEVEL},
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(default_config, f)

    os.chmod(config_path, 0o600)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def _load_optional_config(config_path: Path | None) -> dict[str, Any]:
    try:
        return load_config(config_path)
    except FileNotFoundError:
        return {}
    except tomllib.TOMLDecodeError as e:
        logger.warning("Ignoring invalid config %s: %s", config_path or get_config_path(), e)
        return {}


def check_config(config_path: Path | None = None) -> str | None:
    """Check that the config file, if present, is valid TOML.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        The parse error message, or None when the config is valid or absent.
    """
    try:
        load_config(config_path)
    except FileNotFoundError:
        return None
    except tomllib.TOMLDecodeError as e:
        return str(e)
    return None


def _get_section(config: dict[str, Any], name: str) -> dict[str, Any]:
    section = config.get(name, {})
    return section if isinstance(section, dict) else {}


def get_data_path(config_path: Path | None = None) -> Path:
    """Get the transactions data file path.

    Uses ``[storage].data_file`` when the config exists and sets it,
    otherwise the default location. An unparseable config is logged and
    treated as absent.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Path to the data file.
    """
    config = _load_optional_config(config_path)
    data_file = _get_section(config, "storage").get("data_file")
    if isinstance(data_file, str) and data_file:
        return Path(data_file).expanduser()
    return get_default_data_path()


def get_log_level(config_path: Path | None = None) -> str:
    """Get the configured log level name (default WARNING)."""
    config = _load_optional_config(config_path)
    return str(_get_section(config, "logging").get("level", DEFAULT_LOG_LEVEL))
