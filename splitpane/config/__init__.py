"""Configuration for splitpane."""

from .constants import DEFAULT_MINIMUM_SIZE, DEFAULT_SASH_SIZE
from .settings import get_default_sash_size, get_layouts_dir, get_log_level

__all__ = [
    "DEFAULT_MINIMUM_SIZE",
    "DEFAULT_SASH_SIZE",
    "get_default_sash_size",
    "get_layouts_dir",
    "get_log_level",
]
