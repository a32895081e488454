"""Configuration utilities for splitpane."""

import logging
import os
from pathlib import Path
from typing import List, Optional, Tuple

from .constants import DEFAULT_LAYOUTS_DIR, DEFAULT_SASH_SIZE, ENV_VAR_DEFINITIONS

logger = logging.getLogger(__name__)


def validate_env_var(name: str, value: Optional[str]) -> Tuple[bool, Optional[str]]:
    """Validate a single environment variable value.

    Args:
        name: The environment variable name.
        value: The current value (or None if not set).

    Returns:
        Tuple of (is_valid, error_message).
    """
    if name not in ENV_VAR_DEFINITIONS:
        return True, None  # Unknown vars are always valid

    if value is None:
        return True, None

    if name == "SPLITPANE_SASH_SIZE":
        try:
            float(value)
        except ValueError:
            return False, f"Invalid value '{value}' for {name}. Expected a number"
        return True, None

    valid_values = ENV_VAR_DEFINITIONS[name].get("valid_values")
    if valid_values is None:
        return True, None

    if value.upper() not in [v.upper() for v in valid_values]:
        return False, f"Invalid value '{value}' for {name}. Valid values: {valid_values}"

    return True, None


def validate_all_env_vars() -> List[str]:
    """Validate all splitpane environment variables.

    Returns:
        List of error messages (empty if all valid).
    """
    errors = []
    for name in ENV_VAR_DEFINITIONS:
        is_valid, error = validate_env_var(name, os.environ.get(name))
        if not is_valid:
            errors.append(error)
    return errors


def get_env_var(name: str, validate: bool = True) -> Optional[str]:
    """Get an environment variable, ignoring values that fail validation.

    Args:
        name: The environment variable name.
        validate: Whether to validate the value against known definitions.

    Returns:
        The environment variable value, or None if not set or invalid.
    """
    value = os.environ.get(name)
    if validate:
        is_valid, error = validate_env_var(name, value)
        if not is_valid:
            logger.warning(error)
            return None
    return value


def get_default_sash_size() -> float:
    """Sash size to start with, honouring SPLITPANE_SASH_SIZE."""
    value = get_env_var("SPLITPANE_SASH_SIZE")
    if value is None:
        return DEFAULT_SASH_SIZE
    return float(value)


def get_layouts_dir() -> Path:
    """Directory for user layout files, honouring SPLITPANE_LAYOUTS_DIR."""
    value = get_env_var("SPLITPANE_LAYOUTS_DIR")
    if value:
        return Path(value).expanduser()
    return DEFAULT_LAYOUTS_DIR


def get_log_level() -> str:
    """Log level name from SPLITPANE_LOG_LEVEL (WARNING when unset)."""
    value = get_env_var("SPLITPANE_LOG_LEVEL")
    return value.upper() if value else "WARNING"
