"""
Split-pane layout engine.

Provides the size-distribution engine behind resizable split views:
- Panes with minimum/maximum bounds, priorities and snap-to-collapse
- Preferred sizes as absolute units or percentages of the container
- Sash dragging with cascading redistribution and snapping
- Proportional relayout when the container is resized
- YAML layout definitions and a headless controller to host them

Example usage:
    from splitpane.layout import Pane, SplitView

    split_view = SplitView()
    split_view.layout(800)
    split_view.add_view(Pane("sidebar", minimum_size=100))
    split_view.add_view(Pane("editor"))

From a layout file:
    from splitpane.layout import LayoutManager, SplitController

    controller = SplitController(LayoutManager().load_layout("editor"))
    controller.layout(1200)
"""

from .config import PaneSpec, SplitLayoutSpec
from .context import LayoutContext
from .controller import SplitController
from .events import Emitter, Subscription
from .manager import LayoutManager
from .pane import LayoutPriority, Pane
from .sash import (
    Orientation,
    Sash,
    get_sash_hover_size,
    get_sash_size,
    set_sash_size,
)
from .sizing import PreferredSize, SizeKind
from .splitview import (
    Sizing,
    SizingKind,
    SplitView,
    SplitViewDescriptor,
    StructureChange,
    ViewDescriptor,
)

__all__ = [
    # Config classes
    "PaneSpec",
    "SplitLayoutSpec",
    # Manager / host
    "LayoutManager",
    "SplitController",
    # Engine
    "SplitView",
    "SplitViewDescriptor",
    "ViewDescriptor",
    "Sizing",
    "SizingKind",
    "StructureChange",
    # Panes
    "Pane",
    "LayoutPriority",
    "LayoutContext",
    "PreferredSize",
    "SizeKind",
    # Sashes
    "Orientation",
    "Sash",
    "get_sash_size",
    "get_sash_hover_size",
    "set_sash_size",
    # Events
    "Emitter",
    "Subscription",
]
