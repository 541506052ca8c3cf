from __future__ import annotations

"""
Configuration Domain Management.

Provides the default lint configuration, loads project configuration
files (JSON or YAML) and persists the user-level configuration in the
application data directory with a version stamp.
"""

import json
import logging
import os
from typing import Any, Dict

import yaml

from layerlint.domain.constants import (
    CONFIG_KEY_ALIASES,
    CURRENT_CONFIG_VERSION,
    DEFAULT_MAX_DEPTH,
    DEFAULT_SEMANTIC_SECTION_NAMES,
    RULE_IDS,
)
from layerlint.domain.errors import InvalidConfiguration
from layerlint.infra.fs import get_user_data_dir, read_text_file, write_text_file

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default lint configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Naming
        "generic_name_patterns": [],
        "semantic_section_names": list(DEFAULT_SEMANTIC_SECTION_NAMES),

        # Structure
        "max_depth": DEFAULT_MAX_DEPTH,

        # Rule selection
        "enabled_rules": list(RULE_IDS),

        # Snapshot reading
        "include_hidden": True,
    }


def get_default_app_state() -> Dict[str, Any]:
    """
    Generate the complete persisted state structure.

    Returns:
        Dict[str, Any]: The full JSON structure for config.json.
    """
    return {
        "version": CURRENT_CONFIG_VERSION,
        "last_session": get_default_config(),
    }


def normalize_config_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    """Translate camelCase option names into their snake_case keys."""
    return {CONFIG_KEY_ALIASES.get(k, k): v for k, v in data.items()}

# -----------------------------------------------------------------------------
# Project Configuration Files
# -----------------------------------------------------------------------------
def load_config_file(path: str) -> Dict[str, Any]:
    """
    Load a project configuration file.

    ``.yaml``/``.yml`` files are parsed with PyYAML, anything else as JSON.
    An empty file yields an empty dictionary.

    Args:
        path: Configuration file on disk.

    Returns:
        Dict[str, Any]: Raw (unvalidated) configuration with normalized keys.

    Raises:
        InvalidConfiguration: If the file cannot be read or is not a mapping.
    """
    try:
        text = read_text_file(path)
    except OSError as e:
        raise InvalidConfiguration(f"Cannot read config file '{path}': {e}", [path]) from e

    _, ext = os.path.splitext(path)
    try:
        if ext.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        else:
            data = json.loads(text) if text.strip() else None
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise InvalidConfiguration(f"Cannot parse config file '{path}': {e}", [path]) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidConfiguration(
            f"Config file '{path}' must contain a mapping, found {type(data).__name__}.",
            [path],
        )

    logger.debug(f"Loaded project configuration from {path}")
    return normalize_config_keys(data)

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def get_config_path() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def load_app_state() -> Dict[str, Any]:
    """
    Load the persisted state from disk, falling back to defaults.

    Returns:
        Dict[str, Any]: The loaded state or a default structure on failure.
    """
    default_state = get_default_app_state()
    config_path = get_config_path()

    if not os.path.exists(config_path):
        logger.debug("Config file not found. Returning defaults.")
        return default_state

    try:
        data = json.loads(read_text_file(config_path))
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return default_state

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return default_state

    state = default_state
    session = data.get("last_session")
    if isinstance(session, dict):
        state["last_session"].update(normalize_config_keys(session))

    state["version"] = CURRENT_CONFIG_VERSION
    return state


def save_app_state(state: Dict[str, Any]) -> None:
    """
    Persist application state to disk.

    Args:
        state: The state dictionary to save.
    """
    config_path = get_config_path()
    state["version"] = CURRENT_CONFIG_VERSION
    try:
        write_text_file(config_path, json.dumps(state, ensure_ascii=False, indent=4))
        logger.debug(f"Configuration saved to {config_path}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")

# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """Retrieve the persisted user configuration merged over the defaults."""
    defaults = get_default_config()
    defaults.update(load_app_state().get("last_session", {}))
    return defaults


def save_config(config: Dict[str, Any]) -> None:
    """Save the provided config as the 'last_session'."""
    state = load_app_state()
    state["last_session"] = dict(config)
    save_app_state(state)
