"""Provides functions for loading and accessing configuration settings.

Supports loading from a YAML configuration file (~/.typedcache/config.yaml),
.env files and environment variables (TYPEDCACHE_<KEY>, dots replaced by
underscores, e.g. TYPEDCACHE_STORE_DIRECTORY).
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# --- Configuration Constants ---
DEFAULT_CONFIG_DIR = Path.home() / ".typedcache"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.yaml"
DEFAULT_STORE_DIR = DEFAULT_CONFIG_DIR / "store"
DEFAULT_STORE_TIMEOUT_SECONDS = 60
DEFAULT_CACHE_MAX_ITEMS = 1024
ENV_FILE_NAME = ".env"
ENV_PREFIX = "TYPEDCACHE_"

# --- Global Configuration Store ---
_config: Dict[str, Any] = {}
_test_config: Dict[str, Any] = {}
_loaded = False


def load_configuration(config_file: Path = DEFAULT_CONFIG_FILE, env_file: Optional[Path] = None) -> None:
    """Loads configuration from the YAML file and the .env file.

    Priority order (highest to lowest):
    1. Test overrides (set_config_for_testing)
    2. Environment Variables
    3. .env file
    4. YAML configuration file
    5. Defaults passed to get_config

    Args:
        config_file: Path to the YAML configuration file.
        env_file: Path to the .env file (searches upwards from cwd if None).
    """
    global _config, _loaded
    if _loaded:
        logger.debug("Configuration already loaded.")
        return

    _config = {}

    # 1. YAML file (Lowest priority)
    if config_file.exists():
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                yaml_config = yaml.safe_load(f)
            if isinstance(yaml_config, dict):
                _config.update(_flatten(yaml_config))
                logger.info(f"Loaded configuration from YAML: {config_file}")
            elif yaml_config is not None:
                logger.warning(f"YAML config file {config_file} did not contain a mapping.")
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load or parse YAML config {config_file}: {e}")
    else:
        logger.debug(f"YAML config file not found: {config_file}")

    # 2. .env file; override=False so real environment variables win
    dotenv_path = env_file or find_dotenv_path()
    if dotenv_path:
        if load_dotenv(dotenv_path=dotenv_path, override=False):
            logger.info(f"Loaded environment variables from: {dotenv_path}")
    else:
        logger.debug("No .env file found at or above the current directory.")

    _loaded = True
    logger.debug("Configuration loading process completed.")


def _flatten(mapping: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
    """Turns nested YAML sections into dotted keys ({'store': {'timeout': 5}} -> 'store.timeout')."""
    flat: Dict[str, Any] = {}
    for key, value in mapping.items():
        dotted = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, f"{dotted}."))
        else:
            flat[dotted] = value
    return flat


def env_var_name(key: str) -> str:
    """Environment variable consulted for a dotted config key."""
    return ENV_PREFIX + key.upper().replace(".", "_")


def get_config(key: str, default: Any = None) -> Any:
    """
    Get a configuration value by dotted key.

    Args:
        key: The configuration key (e.g., 'store.directory')
        default: Default value if the key is not found

    Returns:
        The configuration value
    """
    if key in _test_config:
        return _test_config[key]

    env_key = env_var_name(key)
    if env_key in os.environ:
        value = os.environ[env_key]
        # Try to convert common types
        if value.lower() == "true":
            return True
        elif value.lower() == "false":
            return False
        try:
            if "." in value:
                return float(value)
            else:
                return int(value)
        except (ValueError, TypeError):
            return value

    if key in _config:
        return _config[key]

    logger.debug(f"Config key '{key}' not found in environment or loaded config. Returning default: {default}")
    return default


def find_dotenv_path() -> Optional[Path]:
    """Searches for the .env file upwards from the current directory."""
    cwd = Path.cwd()
    for path in [cwd] + list(cwd.parents):
        env_path = path / ENV_FILE_NAME
        if env_path.is_file():
            return env_path
    return None


# --- Convenience Functions ---

def get_store_directory() -> Path:
    """Directory holding the durable value store."""
    return Path(str(get_config("store.directory", DEFAULT_STORE_DIR))).expanduser()


def get_store_timeout() -> float:
    """Seconds the store waits on a locked database."""
    timeout = get_config("store.timeout", DEFAULT_STORE_TIMEOUT_SECONDS)
    try:
        return float(timeout)
    except (TypeError, ValueError):
        logger.warning(f"Invalid store.timeout {timeout!r}; using {DEFAULT_STORE_TIMEOUT_SECONDS}.")
        return float(DEFAULT_STORE_TIMEOUT_SECONDS)


def get_cache_max_items() -> Optional[int]:
    """Memory cache capacity; 0 or a negative value means unbounded."""
    max_items = get_config("cache.max_items", DEFAULT_CACHE_MAX_ITEMS)
    try:
        max_items = int(max_items)
    except (TypeError, ValueError):
        logger.warning(f"Invalid cache.max_items {max_items!r}; using {DEFAULT_CACHE_MAX_ITEMS}.")
        return DEFAULT_CACHE_MAX_ITEMS
    return max_items if max_items > 0 else None


def set_config_for_testing(config_dict: Dict[str, Any]) -> None:
    """
    Set configuration values for testing purposes.
    These values will override any existing configuration.

    Args:
        config_dict: Dictionary of configuration values to set
    """
    _test_config.update(config_dict)
    logger.debug(f"Set testing configuration: {config_dict}")


def clear_test_config() -> None:
    """Clear all testing configuration values."""
    _test_config.clear()
    logger.debug("Cleared testing configuration")
