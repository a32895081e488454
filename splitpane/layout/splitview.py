"""
Split view engine.

The SplitView owns an ordered sequence of panes and decides how much of the
container each one gets. It is responsible for:
- Laying panes out when the container size changes
- Resizing a single pane and cascading the difference to its neighbours
- Adding, removing and reordering panes
- Snapping panes closed (and open again) while a sash is dragged
- Telling the host about every observable change

All operations are synchronous. Notifications fire after the operation has
finished, so listeners always see a consistent state.

Usage:
    split_view = SplitView(Orientation.HORIZONTAL)
    split_view.on_did_change.subscribe(lambda sizes: print(sizes))
    split_view.layout(800)
    split_view.add_view(Pane("sidebar", minimum_size=100))
    split_view.add_view(Pane("editor"))
    split_view.move_sash(0, 50)
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

from ..config.constants import SNAP_HYSTERESIS_RATIO
from ..exceptions import (
    InvalidIndexError,
    LastVisiblePaneError,
    NotSnappableError,
    SizeMismatchError,
    SizeSumMismatchError,
    SplitPaneError,
)
from .context import LayoutContext
from .distribute import (
    Bounds,
    boundary_delta_range,
    clamp,
    distribute_empty_space,
    even_sizes,
    priority_order,
    proportional_sizes,
    push_to_neighbors,
    resize_boundary,
    resize_pane,
)
from .events import Emitter
from .pane import Pane
from .sash import Orientation, Sash, SashDragState, SnapTarget, get_sash_size

logger = logging.getLogger(__name__)


class SizingKind(Enum):
    """How a newly added pane gets its initial size."""

    DISTRIBUTE = "distribute"  # Even out all panes
    SPLIT = "split"  # Take half of a neighbour
    FIXED = "fixed"  # Start at a given size
    INVISIBLE = "invisible"  # Start collapsed, remembering a size to restore


@dataclass(frozen=True)
class Sizing:
    """Sizing mode for ``add_view`` / ``remove_view``.

    Examples:
        >>> Sizing.distribute()
        >>> Sizing.split(0)        # halve pane 0
        >>> Sizing.fixed(200)
        >>> Sizing.invisible(200)  # collapsed, restores to 200
    """

    kind: SizingKind = SizingKind.DISTRIBUTE
    value: float = 0

    @classmethod
    def distribute(cls) -> "Sizing":
        return cls(SizingKind.DISTRIBUTE)

    @classmethod
    def split(cls, index: int) -> "Sizing":
        return cls(SizingKind.SPLIT, index)

    @classmethod
    def fixed(cls, size: float) -> "Sizing":
        return cls(SizingKind.FIXED, size)

    @classmethod
    def invisible(cls, cached_visible_size: float) -> "Sizing":
        return cls(SizingKind.INVISIBLE, cached_visible_size)


@dataclass
class ViewDescriptor:
    """Initial state of one pane when seeding a split view."""

    pane: Pane
    size: float
    visible: bool = True


@dataclass
class SplitViewDescriptor:
    """Initial panes and container size, applied without a layout pass."""

    size: float
    views: List[ViewDescriptor] = field(default_factory=list)


@dataclass(frozen=True)
class StructureChange:
    """A pane was added, removed or moved.

    Attributes:
        kind: "add", "remove" or "move"
        index: Index of the pane (its old index for "move")
        pane: The pane concerned; ``pane.content`` is the host's handle
        to_index: New index for "move"
    """

    kind: str
    index: int
    pane: Pane
    to_index: Optional[int] = None


class _ViewItem:
    """Engine-side record of a pane: current size and visibility."""

    def __init__(self, pane: Pane, size: float, cached_visible_size: Optional[float] = None) -> None:
        self.pane = pane
        self.size = size
        self.cached_visible_size = cached_visible_size

    @property
    def visible(self) -> bool:
        return self.cached_visible_size is None

    @property
    def minimum_size(self) -> float:
        return self.pane.minimum_size if self.visible else 0

    @property
    def maximum_size(self) -> float:
        return self.pane.maximum_size if self.visible else 0

    def set_visible(self, visible: bool, size: Optional[float] = None) -> None:
        """Collapse (remembering ``size`` or the current size) or restore."""
        if visible == self.visible:
            return
        if visible:
            self.size = clamp(self.cached_visible_size, self.pane.minimum_size, self.pane.maximum_size)
            self.cached_visible_size = None
        else:
            self.cached_visible_size = self.size if size is None else size
            self.size = 0

    def bounds(self) -> Bounds:
        return Bounds(self.minimum_size, self.maximum_size, self.pane.priority)


class SplitView:
    """Ordered panes sharing one container axis.

    Attributes:
        orientation: Layout axis, fixed at construction
        proportional_layout: Whether container resizes keep each pane's share
        layout_context: Container size cell shared with percentage-sized panes
        sash_size: Sash thickness captured at construction
    """

    def __init__(
        self,
        orientation: Orientation = Orientation.HORIZONTAL,
        *,
        proportional_layout: bool = True,
        layout_context: Optional[LayoutContext] = None,
        descriptor: Optional[SplitViewDescriptor] = None,
        on_did_change: Optional[Callable[[List[float]], Any]] = None,
    ) -> None:
        self.orientation = Orientation.from_value(orientation)
        self.proportional_layout = proportional_layout
        self.layout_context = layout_context or LayoutContext()
        self.sash_size = get_sash_size()

        self._items: List[_ViewItem] = []
        self._size: float = 0
        self._proportions: Optional[List[float]] = None
        self._drag: Optional[SashDragState] = None
        self._pending_visibility: List[Tuple[int, bool]] = []
        self._disposed = False

        self.on_did_change = Emitter("did_change")
        self.on_did_visibility_change = Emitter("did_visibility_change")
        self.on_did_sash_change = Emitter("did_sash_change")
        self.on_did_sash_reset = Emitter("did_sash_reset")
        self.on_did_structure_change = Emitter("did_structure_change")

        if on_did_change is not None:
            self.on_did_change.subscribe(on_did_change)

        if descriptor is not None:
            self._size = descriptor.size
            self.layout_context.set_size(descriptor.size)
            for view in descriptor.views:
                view.pane.attach_layout_context(self.layout_context)
                if view.visible:
                    self._items.append(_ViewItem(view.pane, view.size))
                else:
                    self._items.append(_ViewItem(view.pane, 0, cached_visible_size=view.size))
            self._layout_views()
            self._save_proportions()

    # =========================================================================
    # Read accessors
    # =========================================================================

    @property
    def size(self) -> float:
        """Container size along the layout axis."""
        return self._size

    @property
    def length(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    @property
    def content_size(self) -> float:
        return sum(item.size for item in self._items)

    @property
    def panes(self) -> List[Pane]:
        return [item.pane for item in self._items]

    @property
    def proportions(self) -> Optional[List[float]]:
        return list(self._proportions) if self._proportions is not None else None

    def get_sizes(self) -> List[float]:
        """Current size of every pane, in order."""
        return [item.size for item in self._items]

    def get_view(self, index: int) -> Pane:
        self._check_index(index)
        return self._items[index].pane

    def get_view_size(self, index: int) -> float:
        self._check_index(index)
        return self._items[index].size

    def get_view_cached_visible_size(self, index: int) -> Optional[float]:
        """Size a collapsed pane will be restored to (None when visible)."""
        self._check_index(index)
        return self._items[index].cached_visible_size

    def is_view_visible(self, index: int) -> bool:
        self._check_index(index)
        return self._items[index].visible

    @property
    def sashes(self) -> List[Sash]:
        """One sash per adjacent pair of panes."""
        sizes = self.get_sizes()
        bounds = self._bounds()
        maximums = [item.pane.maximum_size for item in self._items]
        result = []
        offset: float = 0
        for index in range(len(self._items) - 1):
            offset += sizes[index]
            min_delta, max_delta = boundary_delta_range(sizes, bounds, index, maximums)
            snaps = self._find_first_snap_index(range(index, -1, -1)) is not None or (
                self._find_first_snap_index(range(index + 1, len(sizes))) is not None
            )
            result.append(
                Sash(
                    index=index,
                    offset=offset,
                    size=self.sash_size,
                    orientation=self.orientation,
                    enabled=min_delta < max_delta or snaps,
                )
            )
        return result

    # =========================================================================
    # Layout
    # =========================================================================

    def layout(self, size: Optional[float] = None) -> None:
        """Lay the panes out in a container of ``size``.

        With proportional layout every pane keeps its share of the container;
        otherwise the difference goes to the highest priority panes first.
        Pass None to re-run the layout at the current size after pane
        constraints changed.

        Args:
            size: New container size along the layout axis
        """
        self._check_not_disposed()
        if size is None:
            size = self._size

        before = self.get_sizes()
        self._size = size
        self.layout_context.set_size(size)

        bounds = self._bounds()
        count = len(self._items)

        if self.proportional_layout and self._proportions is not None and len(self._proportions) == count:
            sizes = proportional_sizes(
                self._proportions, bounds, size, priority_order(bounds, range(count))
            )
        else:
            sizes = [clamp(s, b.minimum, b.maximum) for s, b in zip(before, bounds)]
            sizes = distribute_empty_space(
                sizes, bounds, size, priority_order(bounds, reversed(range(count)))
            )

        self._apply_sizes(sizes)
        logger.debug(f"Layout at {size}: {self.get_sizes()}")

        if self.proportional_layout and self._proportions is None:
            self._save_proportions()

        self._finish(before, save_proportions=False)

    def resize_view(self, index: int, size: float) -> None:
        """Resize one pane, pushing the difference onto its neighbours.

        The size is clamped to the pane's bounds and to what the other panes
        can give or take. Both immediate neighbours share the difference,
        cascading further out only when they saturate.

        Args:
            index: Pane to resize
            size: Requested size

        Raises:
            InvalidIndexError: If index is out of range
        """
        self._check_not_disposed()
        self._check_index(index)
        before = self.get_sizes()
        item = self._items[index]

        target = clamp(round(size), item.minimum_size, min(item.maximum_size, self._size))
        bounds = self._bounds()
        sizes = resize_pane(before, bounds, index, target)
        sizes = distribute_empty_space(sizes, bounds, self._size, self._relayout_order(bounds, low=[index]))

        self._apply_sizes(sizes)
        logger.debug(f"Resized view {index} to {sizes[index]} (requested {size})")
        self._finish(before)

    def resize_views(self, sizes: Sequence[float]) -> None:
        """Overwrite every pane size at once.

        Sizes of 0 (or less) collapse snap panes; a positive size restores
        them. Any other size outside a pane's bounds is clamped, and the
        difference is spread over the remaining panes.

        Raises:
            SizeMismatchError: If the number of sizes differs from the number of panes
            SizeSumMismatchError: If the sizes do not add up to the container size
        """
        self._check_not_disposed()
        if len(sizes) != len(self._items):
            raise SizeMismatchError(expected=len(self._items), actual=len(sizes))

        total = sum(sizes)
        if abs(total - self._size) > len(self._items):
            raise SizeSumMismatchError(expected=self._size, actual=total)

        before = self.get_sizes()
        result = list(sizes)
        clamped = []
        for index, (item, size) in enumerate(zip(self._items, sizes)):
            if item.pane.snap and size <= 0:
                if item.visible:
                    item.set_visible(False, size=item.pane.minimum_size)
                    self._pending_visibility.append((index, False))
                result[index] = 0
                continue
            if not item.visible:
                item.cached_visible_size = None
                self._pending_visibility.append((index, True))
            result[index] = clamp(size, item.pane.minimum_size, item.pane.maximum_size)
            if result[index] != size:
                clamped.append(index)

        if clamped:
            logger.debug(f"Clamped sizes of views {clamped} to their bounds: {result}")
            bounds = self._bounds()
            result = distribute_empty_space(
                result, bounds, self._size, self._relayout_order(bounds, low=clamped)
            )
            leftover = self._size - sum(result)
            if leftover:
                result = self._overflow(result, leftover)

        self._apply_sizes(result)
        self._finish(before)

    def distribute_view_sizes(self) -> None:
        """Give every visible pane an equal share, respecting bounds."""
        self._check_not_disposed()
        before = self.get_sizes()
        self._apply_sizes(self._even_sizes())
        self._finish(before)

    # =========================================================================
    # Structure
    # =========================================================================

    def add_view(self, pane: Pane, sizing: Optional[Sizing] = None, index: Optional[int] = None) -> None:
        """Insert a pane.

        Args:
            pane: The pane to add
            sizing: How the pane gets its initial size (default: distribute)
            index: Insertion index (default: end)

        Raises:
            InvalidIndexError: If index (or a split neighbour) is out of range
        """
        self._check_not_disposed()
        count = len(self._items)
        if index is None:
            index = count
        if not 0 <= index <= count:
            raise InvalidIndexError("Insertion index out of range", index=index, length=count)

        sizing = sizing or Sizing.distribute()
        if sizing.kind is SizingKind.SPLIT and not 0 <= int(sizing.value) < count:
            raise InvalidIndexError("Split neighbour out of range", index=int(sizing.value), length=count)

        before = self.get_sizes()
        pane.attach_layout_context(self.layout_context)

        if sizing.kind is SizingKind.FIXED:
            item = _ViewItem(pane, sizing.value)
        elif sizing.kind is SizingKind.INVISIBLE:
            item = _ViewItem(pane, 0, cached_visible_size=sizing.value)
        elif sizing.kind is SizingKind.SPLIT:
            item = _ViewItem(pane, 0)
        else:
            item = _ViewItem(pane, pane.minimum_size)

        self._items.insert(index, item)
        if self._proportions is not None:
            self._proportions.insert(index, 0)

        bounds = self._bounds()
        sizes = self.get_sizes()
        high: List[int] = []

        if sizing.kind is SizingKind.SPLIT:
            neighbor = int(sizing.value)
            if neighbor >= index:
                neighbor += 1
            sizes = self._split_sizes(sizes, bounds, neighbor, index)
            high = [neighbor]

        if sizing.kind is SizingKind.DISTRIBUTE:
            self._apply_sizes(self._even_sizes())
        else:
            sizes = distribute_empty_space(
                sizes, bounds, self._size, self._relayout_order(bounds, low=[index], high=high)
            )
            self._apply_sizes(sizes)

        logger.debug(f"Added view at {index} ({sizing.kind.value}): {self.get_sizes()}")
        self.on_did_structure_change.fire(StructureChange("add", index, pane))
        self._finish(before)

    def remove_view(self, index: int, sizing: Optional[Sizing] = None) -> Pane:
        """Remove a pane and hand its space to the remaining panes.

        The vacated space is shared in proportion to the remaining panes'
        sizes; whatever their bounds cannot take goes to the rightmost
        visible pane.

        Args:
            index: Pane to remove
            sizing: Pass ``Sizing.distribute()`` to even out the rest afterwards

        Returns:
            The removed pane

        Raises:
            InvalidIndexError: If index is out of range
        """
        self._check_not_disposed()
        self._check_index(index)
        before = self.get_sizes()

        item = self._items.pop(index)
        if self._proportions is not None:
            self._proportions.pop(index)
        if self._drag is not None:
            self._drag = None

        if self._items:
            if sizing is not None and sizing.kind is SizingKind.DISTRIBUTE:
                self._apply_sizes(self._even_sizes())
            else:
                self._apply_sizes(self._absorb(item.size))

        logger.debug(f"Removed view {index}: {self.get_sizes()}")
        self.on_did_structure_change.fire(StructureChange("remove", index, item.pane))
        self._finish(before)
        return item.pane

    def move_view(self, from_index: int, to_index: int) -> None:
        """Move a pane to another position without changing any size.

        Raises:
            InvalidIndexError: If either index is out of range
        """
        self._check_not_disposed()
        self._check_index(from_index)
        self._check_index(to_index)
        if from_index == to_index:
            return

        before = self.get_sizes()
        item = self._items.pop(from_index)
        self._items.insert(to_index, item)
        if self._proportions is not None:
            self._proportions.insert(to_index, self._proportions.pop(from_index))

        self.on_did_structure_change.fire(StructureChange("move", from_index, item.pane, to_index))
        self._finish(before, save_proportions=False)

    # =========================================================================
    # Visibility
    # =========================================================================

    def set_view_visible(self, index: int, visible: bool) -> None:
        """Collapse a snap pane to 0 or restore it.

        The pane's space is handed to (or taken back from) its neighbours the
        same way ``resize_view`` does. A restored pane gets its cached size,
        clamped to its bounds, and takes any space the other panes cannot.

        Raises:
            InvalidIndexError: If index is out of range
            NotSnappableError: If the pane does not have snap enabled
            LastVisiblePaneError: If hiding the only visible pane
        """
        self._check_not_disposed()
        self._check_index(index)
        item = self._items[index]
        if not item.pane.snap:
            raise NotSnappableError(index=index)
        if item.visible == visible:
            return
        if not visible and not any(other.visible for other in self._items if other is not item):
            raise LastVisiblePaneError(index=index)

        before = self.get_sizes()

        if visible:
            item.set_visible(True)
            target = item.size
            sizes = self.get_sizes()
            sizes[index] = 0
            bounds = self._bounds()
            sizes = resize_pane(sizes, bounds, index, target)
            sizes = distribute_empty_space(
                sizes, bounds, self._size, self._relayout_order(bounds, high=[index])
            )
            leftover = self._size - sum(sizes)
            if leftover:
                sizes = self._overflow(sizes, leftover)
        else:
            freed = item.size
            item.set_visible(False)
            sizes, leftover = push_to_neighbors(self.get_sizes(), self._bounds(), index, freed)
            if leftover:
                sizes = self._overflow(sizes, leftover)

        self._apply_sizes(sizes)
        self._pending_visibility.append((index, visible))
        self._finish(before)

    # =========================================================================
    # Sashes
    # =========================================================================

    def start_sash_drag(self, index: int) -> None:
        """Begin dragging the sash after pane ``index``.

        Raises:
            InvalidIndexError: If there is no such sash
        """
        self._check_not_disposed()
        self._check_sash_index(index)
        if self._drag is not None:
            self.end_sash_drag()

        sizes = self.get_sizes()
        bounds = self._bounds()
        maximums = [item.pane.maximum_size for item in self._items]
        min_delta, max_delta = boundary_delta_range(sizes, bounds, index, maximums)

        snap_before = None
        snap_after = None
        before_index = self._find_first_snap_index(range(index, -1, -1))
        after_index = self._find_first_snap_index(range(index + 1, len(self._items)))

        if before_index is not None:
            item = self._items[before_index]
            margin = math.floor(item.pane.minimum_size * SNAP_HYSTERESIS_RATIO)
            snap_before = SnapTarget(
                index=before_index,
                limit_delta=min_delta - margin if item.visible else min_delta + margin,
                size=item.size,
            )

        if after_index is not None:
            item = self._items[after_index]
            margin = math.floor(item.pane.minimum_size * SNAP_HYSTERESIS_RATIO)
            snap_after = SnapTarget(
                index=after_index,
                limit_delta=max_delta + margin if item.visible else max_delta - margin,
                size=item.size,
            )

        self._drag = SashDragState(
            index=index,
            sizes=sizes,
            min_delta=min_delta,
            max_delta=max_delta,
            snap_before=snap_before,
            snap_after=snap_after,
        )
        logger.debug(f"Sash drag started at {index} (delta range {min_delta}..{max_delta})")

    def drag_sash(self, delta: float) -> float:
        """Move the dragged sash ``delta`` away from where the drag started.

        Positive deltas grow the pane before the sash. Snap panes pushed far
        enough past their minimum collapse; dragging back restores them.

        Returns:
            Delta actually applied (truncated to the available room)

        Raises:
            SplitPaneError: If no drag is in progress
        """
        self._check_not_disposed()
        state = self._drag
        if state is None:
            raise SplitPaneError("No sash drag in progress")

        state.current = delta
        before = self.get_sizes()

        snapped = False
        if state.snap_before is not None:
            snapped = self._snap(state.snap_before.index, delta >= state.snap_before.limit_delta)
        if not snapped and state.snap_after is not None:
            self._snap(state.snap_after.index, delta <= state.snap_after.limit_delta)

        bounds = self._bounds()
        sizes, applied = resize_boundary(state.sizes, bounds, state.index, delta)
        sizes = distribute_empty_space(sizes, bounds, self._size, self._relayout_order(bounds))

        self._apply_sizes(sizes)
        self._finish(before, save_proportions=False)
        return applied

    def end_sash_drag(self) -> None:
        """Finish the current drag (no-op when none is in progress)."""
        state = self._drag
        if state is None:
            return
        self._drag = None
        self._save_proportions()
        logger.debug(f"Sash drag ended at {state.index}: {self.get_sizes()}")
        self.on_did_sash_change.fire(state.index)

    def move_sash(self, index: int, delta: float) -> float:
        """Drag the sash after pane ``index`` by ``delta`` in one step.

        Returns:
            Delta actually applied
        """
        self.start_sash_drag(index)
        try:
            return self.drag_sash(delta)
        finally:
            self.end_sash_drag()

    def reset_sash(self, index: int) -> None:
        """Signal a reset gesture (e.g. double click) on a sash.

        The engine does not change any size; the host decides what a reset
        means through ``on_did_sash_reset``.
        """
        self._check_not_disposed()
        self._check_sash_index(index)
        self.on_did_sash_reset.fire(index)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def dispose(self) -> None:
        """Release all panes and listeners."""
        for emitter in (
            self.on_did_change,
            self.on_did_visibility_change,
            self.on_did_sash_change,
            self.on_did_sash_reset,
            self.on_did_structure_change,
        ):
            emitter.dispose()
        self._items.clear()
        self._proportions = None
        self._drag = None
        self._disposed = True

    # =========================================================================
    # Internals
    # =========================================================================

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise InvalidIndexError(index=index, length=len(self._items))

    def _check_sash_index(self, index: int) -> None:
        count = max(len(self._items) - 1, 0)
        if not 0 <= index < count:
            raise InvalidIndexError("Sash index out of range", index=index, length=count)

    def _check_not_disposed(self) -> None:
        if self._disposed:
            raise SplitPaneError("Split view has been disposed")

    def _bounds(self) -> List[Bounds]:
        return [item.bounds() for item in self._items]

    def _apply_sizes(self, sizes: Sequence[float]) -> None:
        for item, size in zip(self._items, sizes):
            item.size = size

    def _relayout_order(
        self, bounds: Sequence[Bounds], low: Iterable[int] = (), high: Iterable[int] = ()
    ) -> List[int]:
        """Last pane first, by priority tier, with explicit overrides at either end."""
        low = list(low)
        high = list(high)
        rest = [i for i in reversed(range(len(bounds))) if i not in low and i not in high]
        return high + priority_order(bounds, rest) + low

    def _even_sizes(self) -> List[float]:
        bounds = self._bounds()
        return even_sizes(bounds, self._size, priority_order(bounds, range(len(bounds))))

    def _split_sizes(
        self, sizes: List[float], bounds: Sequence[Bounds], neighbor: int, index: int
    ) -> List[float]:
        """Give the pane at ``index`` half of ``neighbor``, within both panes' bounds."""
        available = sizes[neighbor]
        half = available // 2 if isinstance(available, int) else available / 2
        new_size = clamp(half, bounds[index].minimum, bounds[index].maximum)
        neighbor_size = clamp(available - new_size, bounds[neighbor].minimum, bounds[neighbor].maximum)
        new_size = clamp(available - neighbor_size, bounds[index].minimum, bounds[index].maximum)
        result = list(sizes)
        result[neighbor] = neighbor_size
        result[index] = new_size
        return result

    def _absorb(self, amount: float) -> List[float]:
        """Share ``amount`` of freed space among the panes by their current size."""
        sizes = self.get_sizes()
        bounds = self._bounds()
        visible = [i for i, item in enumerate(self._items) if item.visible]
        total = sum(sizes[i] for i in visible)

        result = list(sizes)
        if total > 0:
            for i in visible:
                share = round(amount * sizes[i] / total)
                result[i] = clamp(sizes[i] + share, bounds[i].minimum, bounds[i].maximum)

        result = distribute_empty_space(result, bounds, self._size, priority_order(bounds, range(len(result))))
        leftover = self._size - sum(result)
        if leftover:
            result = self._overflow(result, leftover)
        return result

    def _overflow(self, sizes: List[float], amount: float) -> List[float]:
        """Give space no pane can take within its bounds to the rightmost visible pane."""
        visible = [i for i, item in enumerate(self._items) if item.visible]
        if not visible:
            return sizes
        result = list(sizes)
        result[visible[-1]] += amount
        logger.warning(
            f"No pane can absorb {amount} within its bounds; pane {visible[-1]} takes the remainder"
        )
        return result

    def _find_first_snap_index(self, indexes: Iterable[int]) -> Optional[int]:
        """First pane in ``indexes`` that could snap during a drag.

        Visible snap panes win; a collapsed snap pane only counts when no
        flexible visible pane sits in front of it.
        """
        indexes = list(indexes)
        for index in indexes:
            item = self._items[index]
            if item.visible and item.pane.snap:
                return index

        for index in indexes:
            item = self._items[index]
            if item.visible and item.maximum_size - item.minimum_size > 0:
                return None
            if not item.visible and item.pane.snap:
                return index

        return None

    def _snap(self, index: int, visible: bool) -> bool:
        """Flip a snap pane's visibility during a drag; True when it changed."""
        item = self._items[index]
        if item.visible == visible:
            return False
        item.set_visible(visible, size=item.pane.minimum_size)
        self._pending_visibility.append((index, visible))
        logger.debug(f"View {index} snapped {'open' if visible else 'closed'}")
        return True

    def _save_proportions(self) -> None:
        content_size = self.content_size
        if self.proportional_layout and content_size > 0:
            self._proportions = [item.size / content_size for item in self._items]

    def _layout_views(self) -> None:
        offset: float = 0
        for item in self._items:
            item.pane.layout(item.size, offset)
            offset += item.size

    def _finish(self, before: List[float], save_proportions: bool = True) -> None:
        """Push geometry to the panes, then fire the pending notifications."""
        if save_proportions:
            self._save_proportions()
        self._layout_views()

        pending, self._pending_visibility = self._pending_visibility, []
        for index, visible in pending:
            self.on_did_visibility_change.fire(index, visible)

        sizes = self.get_sizes()
        if sizes != before:
            self.on_did_change.fire(sizes)
