"""
Centralized constants for splitpane.

Magic numbers used by the layout engine, the sash configuration and the
layout file loader live here so their meaning is documented in one place.
"""

import math
from pathlib import Path

# =============================================================================
# PANE DEFAULTS
# =============================================================================

DEFAULT_MINIMUM_SIZE = 30  # Used when a pane declares no minimum size
DEFAULT_MAXIMUM_SIZE = math.inf  # Used when a pane declares no maximum size

# Absolute unit suffix accepted in preferred-size strings ("120px")
ABSOLUTE_UNIT_SUFFIX = "px"
PERCENT_SUFFIX = "%"

# =============================================================================
# SASH GEOMETRY (pixels)
# =============================================================================

DEFAULT_SASH_SIZE = 4
MIN_SASH_SIZE = 4  # Interaction thickness lower bound
MAX_SASH_SIZE = 20  # Interaction thickness upper bound
MIN_SASH_HOVER_SIZE = 1  # Hover affordance lower bound
MAX_SASH_HOVER_SIZE = 8  # Hover affordance upper bound

# A snap pane collapses once dragged past its minimum by this fraction of the minimum
SNAP_HYSTERESIS_RATIO = 0.5

# =============================================================================
# PATHS
# =============================================================================

SPLITPANE_CONFIG_DIR = Path.home() / ".config" / "splitpane"
DEFAULT_LAYOUTS_DIR = SPLITPANE_CONFIG_DIR / "layouts"
LAYOUT_FILE_SUFFIX = ".yaml"

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

ENV_VAR_DEFINITIONS = {
    "SPLITPANE_SASH_SIZE": {
        "description": "Process-wide sash thickness in pixels (clamped to 4-20)",
        "default": str(DEFAULT_SASH_SIZE),
        "valid_values": None,
    },
    "SPLITPANE_LAYOUTS_DIR": {
        "description": "Directory searched for user layout files",
        "default": str(DEFAULT_LAYOUTS_DIR),
        "valid_values": None,
    },
    "SPLITPANE_LOG_LEVEL": {
        "description": "Log level for the splitpane loggers",
        "default": "WARNING",
        "valid_values": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    },
}
