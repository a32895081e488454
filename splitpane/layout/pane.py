"""
Pane constraint records.

A Pane describes how a region of the split view may be sized: its bounds,
its priority when space is redistributed, whether it snaps closed and what
size it would prefer. The split view owns the actual geometry; the pane
only receives the result through ``layout()``.
"""

import math
from enum import Enum
from typing import Any, Optional, Union

from ..config.constants import DEFAULT_MAXIMUM_SIZE, DEFAULT_MINIMUM_SIZE
from ..exceptions import PaneConfigError
from .context import LayoutContext
from .sizing import PreferredSize


class LayoutPriority(Enum):
    """Order in which panes absorb space when the container changes."""

    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"

    @classmethod
    def from_value(cls, value: Union["LayoutPriority", str, None]) -> "LayoutPriority":
        """Coerce a declared priority; None means NORMAL."""
        if value is None:
            return cls.NORMAL
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise PaneConfigError(f"Invalid priority '{value}'", valid=[p.value for p in cls])


class Pane:
    """A constrained, orderable region of a split view.

    Attributes:
        content: Opaque handle to the rendered content. Never inspected,
            only relayed to the host on structural changes.
        size: Size assigned by the last layout pass
        offset: Position along the layout axis assigned by the last layout pass
    """

    def __init__(
        self,
        content: Any = None,
        *,
        layout_context: Optional[LayoutContext] = None,
        minimum_size: Optional[float] = None,
        maximum_size: Optional[float] = None,
        priority: Union[LayoutPriority, str, None] = None,
        preferred_size: Union[float, str, PreferredSize, None] = None,
        snap: Optional[bool] = None,
    ) -> None:
        self.content = content
        self.layout_context = layout_context or LayoutContext()
        self._shares_context = layout_context is None
        self._minimum_size: float = DEFAULT_MINIMUM_SIZE
        self._maximum_size: float = DEFAULT_MAXIMUM_SIZE

        self.minimum_size = minimum_size
        self.maximum_size = maximum_size
        self.priority = priority
        self.preferred_size = preferred_size
        self.snap = snap

        self.size: float = 0
        self.offset: float = 0

    @property
    def minimum_size(self) -> float:
        return self._minimum_size

    @minimum_size.setter
    def minimum_size(self, value: Optional[float]) -> None:
        value = DEFAULT_MINIMUM_SIZE if value is None else value
        if math.isnan(value) or value < 0:
            raise PaneConfigError("Minimum size must be non-negative", minimum_size=value)
        if value > self._maximum_size:
            raise PaneConfigError(
                "Minimum size exceeds maximum size",
                minimum_size=value,
                maximum_size=self._maximum_size,
            )
        self._minimum_size = value

    @property
    def maximum_size(self) -> float:
        return self._maximum_size

    @maximum_size.setter
    def maximum_size(self, value: Optional[float]) -> None:
        value = DEFAULT_MAXIMUM_SIZE if value is None else value
        if math.isnan(value) or value < self._minimum_size:
            raise PaneConfigError(
                "Maximum size is below minimum size",
                minimum_size=self._minimum_size,
                maximum_size=value,
            )
        self._maximum_size = value

    def set_bounds(self, minimum_size: Optional[float], maximum_size: Optional[float]) -> None:
        """Replace both bounds at once, validating the pair rather than each side."""
        minimum = DEFAULT_MINIMUM_SIZE if minimum_size is None else minimum_size
        maximum = DEFAULT_MAXIMUM_SIZE if maximum_size is None else maximum_size
        if math.isnan(minimum) or math.isnan(maximum) or minimum < 0 or maximum < minimum:
            raise PaneConfigError(
                "Invalid pane bounds", minimum_size=minimum, maximum_size=maximum
            )
        self._minimum_size = minimum
        self._maximum_size = maximum

    @property
    def priority(self) -> LayoutPriority:
        return self._priority

    @priority.setter
    def priority(self, value: Union[LayoutPriority, str, None]) -> None:
        self._priority = LayoutPriority.from_value(value)

    @property
    def snap(self) -> bool:
        return self._snap

    @snap.setter
    def snap(self, value: Optional[bool]) -> None:
        self._snap = value if isinstance(value, bool) else False

    @property
    def preferred_size(self) -> Optional[float]:
        """Preferred size evaluated against the current container size."""
        return self._strategy.evaluate(self.layout_context)

    @preferred_size.setter
    def preferred_size(self, value: Union[float, str, PreferredSize, None]) -> None:
        self._strategy = PreferredSize.parse(value)

    @property
    def preferred_size_strategy(self) -> PreferredSize:
        return self._strategy

    def attach_layout_context(self, layout_context: LayoutContext) -> None:
        """Read percentages against the split view's container.

        A context passed at construction is kept.
        """
        if self._shares_context:
            self.layout_context = layout_context

    def layout(self, size: float, offset: float = 0) -> None:
        """Receive the geometry computed by the split view."""
        self.size = size
        self.offset = offset

    def __repr__(self) -> str:
        return (
            f"Pane(content={self.content!r}, minimum_size={self._minimum_size!r}, "
            f"maximum_size={self._maximum_size!r}, priority={self._priority.name}, "
            f"snap={self._snap!r})"
        )
