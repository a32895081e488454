"""
splitpane - Size distribution engine for resizable split views
"""

__version__ = "0.1.0"

from .exceptions import SplitPaneError
from .layout import (
    LayoutPriority,
    Orientation,
    Pane,
    PreferredSize,
    Sizing,
    SplitController,
    SplitView,
)

__all__ = [
    "__version__",
    "SplitPaneError",
    "LayoutPriority",
    "Orientation",
    "Pane",
    "PreferredSize",
    "Sizing",
    "SplitController",
    "SplitView",
]
