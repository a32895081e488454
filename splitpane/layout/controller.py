"""
Headless host for a split view.

SplitController plays the part a UI component plays around the engine: it
turns a declarative layout into panes, seeds or populates the split view on
the first layout, applies preferred sizes and declared visibility, and
answers sash reset gestures. Panes are addressed by their id.

Example usage:
    spec = LayoutManager().load_layout("editor")
    controller = SplitController(spec, on_change=print)
    controller.layout(1200)
    controller.split_view.move_sash(0, -40)
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from ..exceptions import LastVisiblePaneError, PaneNotFoundError
from .config import PaneSpec, SplitLayoutSpec
from .context import LayoutContext
from .pane import Pane
from .splitview import Sizing, SplitView, SplitViewDescriptor, ViewDescriptor

logger = logging.getLogger(__name__)

_UNSET: Any = object()


class SplitController:
    """Drives a SplitView from a SplitLayoutSpec.

    Attributes:
        spec: The layout being hosted
        split_view: The engine
        layout_context: Container size shared with percentage-sized panes
    """

    def __init__(
        self,
        spec: SplitLayoutSpec,
        *,
        on_change: Optional[Callable[[List[float]], Any]] = None,
        on_reset: Optional[Callable[[], Any]] = None,
        on_visible_change: Optional[Callable[[int, bool], Any]] = None,
    ) -> None:
        self.spec = spec
        self.layout_context = LayoutContext()
        self._on_reset = on_reset
        self._on_visible_change = on_visible_change
        self._pane_ids: List[str] = []
        self._pending: List[PaneSpec] = []

        descriptor = None
        default_sizes = spec.default_sizes
        if default_sizes and len(default_sizes) != len(spec.panes):
            logger.warning(
                f"Expected {len(default_sizes)} panes based on default_sizes "
                f"but found {len(spec.panes)}"
            )
            default_sizes = None

        if default_sizes:
            views = []
            for pane_spec, size in zip(spec.panes, default_sizes):
                pane = self._create_pane(pane_spec)
                visible = not (pane.snap and pane_spec.visible is False)
                views.append(ViewDescriptor(pane, size, visible))
                self._pane_ids.append(pane_spec.pane_id)
            descriptor = SplitViewDescriptor(size=sum(default_sizes), views=views)
        else:
            self._pending = list(spec.panes)

        self.split_view = SplitView(
            spec.orientation,
            proportional_layout=spec.proportional_layout,
            layout_context=self.layout_context,
            descriptor=descriptor,
            on_did_change=on_change,
        )
        self.split_view.on_did_visibility_change.subscribe(self._handle_visibility_change)
        self.split_view.on_did_sash_reset.subscribe(self._handle_sash_reset)

    @property
    def pane_ids(self) -> List[str]:
        return list(self._pane_ids)

    @property
    def initialized(self) -> bool:
        """Whether the panes have been handed to the split view."""
        return not self._pending

    def sizes(self) -> List[float]:
        return self.split_view.get_sizes()

    def pane_sizes(self) -> Dict[str, float]:
        return dict(zip(self._pane_ids, self.split_view.get_sizes()))

    def index_of(self, pane_id: str) -> int:
        try:
            return self._pane_ids.index(pane_id)
        except ValueError:
            raise PaneNotFoundError(pane_id) from None

    def get_pane(self, pane_id: str) -> Pane:
        return self.split_view.get_view(self.index_of(pane_id))

    def layout(self, size: float) -> None:
        """Lay out at the observed container size.

        The first layout with a known size adds the declared panes.
        """
        if size <= 0:
            return

        self.split_view.layout(size)

        if self._pending:
            pending, self._pending = self._pending, []
            self._enter(pending, list(range(len(self._pane_ids), len(self._pane_ids) + len(pending))))

    def reset(self) -> None:
        """Restore the default arrangement (or delegate to ``on_reset``)."""
        if self._on_reset is not None:
            self._on_reset()
            return

        self.split_view.distribute_view_sizes()
        for index in range(len(self._pane_ids)):
            self._resize_to_preferred_size(index)

    def resize(self, sizes: List[float]) -> None:
        """Overwrite every pane size (see ``SplitView.resize_views``)."""
        self.split_view.resize_views(sizes)

    def set_visible(self, pane_id: str, visible: bool) -> None:
        self.split_view.set_view_visible(self.index_of(pane_id), visible)

    def update_pane(
        self,
        pane_id: str,
        *,
        min_size: Optional[float] = _UNSET,
        max_size: Optional[float] = _UNSET,
        preferred_size: Any = _UNSET,
    ) -> None:
        """Change a pane's constraints; bound changes trigger a relayout.

        None resets a bound to its default.
        """
        pane = self.get_pane(pane_id)

        if preferred_size is not _UNSET:
            pane.preferred_size = preferred_size

        if min_size is _UNSET and max_size is _UNSET:
            return

        minimum = pane.minimum_size if min_size is _UNSET else min_size
        maximum = pane.maximum_size if max_size is _UNSET else max_size
        previous = (pane.minimum_size, pane.maximum_size)
        pane.set_bounds(minimum, maximum)

        if (pane.minimum_size, pane.maximum_size) != previous:
            logger.debug(f"Pane '{pane_id}' bounds changed to {pane.minimum_size}..{pane.maximum_size}")
            self.split_view.layout()

    def add_pane(self, pane_spec: PaneSpec, index: Optional[int] = None) -> None:
        """Add a pane, sized by distribution then its preferred size."""
        if index is None:
            index = len(self._pane_ids) + len(self._pending)

        if self._pending or self.split_view.size <= 0:
            self._pending.insert(max(index - len(self._pane_ids), 0), pane_spec)
            return

        self._enter([pane_spec], [index])

    def remove_pane(self, pane_id: str) -> Pane:
        index = self.index_of(pane_id)
        pane = self.split_view.remove_view(index)
        del self._pane_ids[index]
        return pane

    def move_pane(self, pane_id: str, index: int) -> None:
        from_index = self.index_of(pane_id)
        self.split_view.move_view(from_index, index)
        self._pane_ids.insert(index, self._pane_ids.pop(from_index))

    def dispose(self) -> None:
        self.split_view.dispose()
        self._pane_ids.clear()
        self._pending.clear()

    def _create_pane(self, pane_spec: PaneSpec) -> Pane:
        return Pane(
            pane_spec.pane_id,
            layout_context=self.layout_context,
            **self.spec.resolve(pane_spec),
        )

    def _enter(self, pane_specs: List[PaneSpec], indexes: List[int]) -> None:
        """Add panes by distribution, then apply preferred sizes and visibility."""
        for pane_spec, index in zip(pane_specs, indexes):
            pane = self._create_pane(pane_spec)
            self.split_view.add_view(pane, Sizing.distribute(), index)
            self._pane_ids.insert(index, pane_spec.pane_id)

        for pane_spec in pane_specs:
            index = self.index_of(pane_spec.pane_id)
            preferred = self.split_view.get_view(index).preferred_size
            if preferred is not None:
                self.split_view.resize_view(index, preferred)

        for pane_spec in pane_specs:
            if pane_spec.visible is None:
                continue
            index = self.index_of(pane_spec.pane_id)
            pane = self.split_view.get_view(index)
            if not pane.snap:
                logger.warning(f"Pane '{pane_spec.pane_id}' declares visibility but cannot snap")
                continue
            if self.split_view.is_view_visible(index) != pane_spec.visible:
                try:
                    self.split_view.set_view_visible(index, pane_spec.visible)
                except LastVisiblePaneError:
                    logger.warning(f"Pane '{pane_spec.pane_id}' is the last visible pane; keeping it shown")

    def _resize_to_preferred_size(self, index: int) -> bool:
        if not 0 <= index < len(self._pane_ids):
            return False
        preferred = self.split_view.get_view(index).preferred_size
        if preferred is None:
            return False
        self.split_view.resize_view(index, round(preferred))
        return True

    def _handle_sash_reset(self, index: int) -> None:
        if self._on_reset is not None:
            self._on_reset()
            return

        if self._resize_to_preferred_size(index):
            return
        if self._resize_to_preferred_size(index + 1):
            return
        self.split_view.distribute_view_sizes()

    def _handle_visibility_change(self, index: int, visible: bool) -> None:
        if self._on_visible_change is not None:
            self._on_visible_change(index, visible)
