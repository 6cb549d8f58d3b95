import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "A11Y_HELPER_SETTINGS"


def get_settings_path() -> Path:
    """Returns the settings file: $A11Y_HELPER_SETTINGS if set, else the packaged settings.json."""
    override = os.environ.get(SETTINGS_ENV_VAR)
    if override:
        return Path(override)
    return Path(__file__).resolve().parent.parent / "settings.json"


def load_config() -> Dict[str, Any]:
    """Loads the application configuration from settings.json."""
    try:
        config_path = get_settings_path()

        if not config_path.exists():
            logger.warning("Configuration file 'settings.json' not found at %s. Using empty config.", config_path)
            return {}

        with open(config_path, "r", encoding="utf-8") as f:
            return json.load(f)

    except Exception as e:
        logger.error("Failed to load settings.json: %s", e, exc_info=True)
        return {}


CONFIG = load_config()


def get_nested_config(key_path: str, default: Optional[Any] = None) -> Any:
    """
    Safely retrieves a nested value from the global CONFIG dictionary.

    Uses a dot as a separator, e.g., 'server.port'.

    Args:
        key_path (str): The dotted path to the configuration value.
        default (Any, optional): The default value to return if the key is not found.

    Returns:
        Any: The configuration value or the provided default.
    """
    keys = key_path.split('.')
    value = CONFIG

    for key in keys:
        if isinstance(value, dict):
            value = value.get(key)
        else:
            return default

    return value if value is not None else default
