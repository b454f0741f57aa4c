from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of the last analysis session using JSON.
Supports version stamping and default fallback on missing or corrupted
state files.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from includewalker.domain.constants import CURRENT_CONFIG_VERSION, DEFAULT_EXCLUDE_PATTERNS
from includewalker.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"
DEFAULT_ERROR_LOG_NAME = "includewalker_errors.txt"


def get_config_file() -> str:
    """Return the absolute path of the persisted configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration (Session State).
    This dictionary drives the behavior of the analysis engine.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Scan
        "input_path": os.getcwd(),
        "recursive": True,
        "exclude_patterns": list(DEFAULT_EXCLUDE_PATTERNS),

        # Ordering
        "with_external": True,

        # Output
        "output_format": "text",

        # Diagnostics
        "save_error_log": False,
        "error_log_path": DEFAULT_ERROR_LOG_NAME,
    }


def get_default_app_state() -> Dict[str, Any]:
    """
    Generate the complete default application state structure.

    Returns:
        Dict[str, Any]: The full JSON structure for config.json.
    """
    return {
        "version": CURRENT_CONFIG_VERSION,
        "last_session": get_default_config(),
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_app_state(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load application state from disk.

    Args:
        config_file: Override for the state file location.

    Returns:
        Dict[str, Any]: The loaded state or a default structure on failure.
    """
    path = config_file or get_config_file()
    default_state = get_default_app_state()

    if not os.path.exists(path):
        logger.debug("Config file not found. Returning defaults.")
        return default_state

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return default_state

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return default_state

    state = default_state
    session = data.get("last_session")
    if isinstance(session, dict):
        state["last_session"].update(session)

    state["version"] = CURRENT_CONFIG_VERSION
    return state


def save_app_state(state: Dict[str, Any], config_file: Optional[str] = None) -> None:
    """
    Persist application state to disk.

    Args:
        state: The state dictionary to save.
        config_file: Override for the state file location.
    """
    path = config_file or get_config_file()
    try:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        state["version"] = CURRENT_CONFIG_VERSION
        with open(path, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {path}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")

# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------

def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Retrieve the active configuration (Last Session) directly.
    """
    state = load_app_state(config_file)
    defaults = get_default_config()
    defaults.update(state.get("last_session", {}))
    return defaults


def save_config(config: Dict[str, Any], config_file: Optional[str] = None) -> None:
    """
    Save the provided config as the 'last_session'.
    """
    state = load_app_state(config_file)
    state["last_session"] = config
    save_app_state(state, config_file)
