"""
Sashes: the boundaries between adjacent panes.

A sash is identified by the index of the pane before it. This module holds
the sash records the split view exposes, the state kept while a sash is
dragged and the process-wide sash thickness.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from ..config.constants import (
    MAX_SASH_HOVER_SIZE,
    MAX_SASH_SIZE,
    MIN_SASH_HOVER_SIZE,
    MIN_SASH_SIZE,
)
from ..config.settings import get_default_sash_size
from .distribute import clamp

logger = logging.getLogger(__name__)


class Orientation(Enum):
    """Axis along which panes are laid out."""

    HORIZONTAL = "horizontal"  # panes left to right
    VERTICAL = "vertical"  # panes top to bottom

    @classmethod
    def from_value(cls, value: Union["Orientation", str, bool]) -> "Orientation":
        """Coerce an orientation; ``True`` means vertical."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.VERTICAL if value else cls.HORIZONTAL
        return cls(str(value).strip().lower())


@dataclass(frozen=True)
class Sash:
    """A boundary between pane ``index`` and pane ``index + 1``.

    Attributes:
        index: Index of the pane before the sash
        offset: Position of the boundary along the layout axis
        size: Thickness of the drag handle
        orientation: Layout orientation of the owning split view
        enabled: Whether dragging the sash can change anything
    """

    index: int
    offset: float
    size: float
    orientation: Orientation
    enabled: bool = True

    @property
    def start(self) -> float:
        """Leading edge of the drag handle, centred on the boundary."""
        return self.offset - self.size / 2


@dataclass(frozen=True)
class SnapTarget:
    """A snap pane that may flip visibility during a drag.

    ``limit_delta`` is the drag delta at which the flip happens.
    """

    index: int
    limit_delta: float
    size: float


@dataclass
class SashDragState:
    """Snapshot taken when a drag starts; each drag step is computed from it."""

    index: int
    sizes: List[float]
    min_delta: float
    max_delta: float
    snap_before: Optional[SnapTarget] = None
    snap_after: Optional[SnapTarget] = None
    current: float = 0


# =============================================================================
# Process-wide sash thickness
# =============================================================================

_sash_size: float = clamp(get_default_sash_size(), MIN_SASH_SIZE, MAX_SASH_SIZE)
_sash_hover_size: float = clamp(get_default_sash_size(), MIN_SASH_HOVER_SIZE, MAX_SASH_HOVER_SIZE)


def set_sash_size(size: float) -> None:
    """Set the sash thickness for split views created from now on.

    The interaction thickness is clamped to [4, 20] and the hover affordance
    to [1, 8]. Existing split views keep the thickness they were built with.

    Args:
        size: Sash size in pixels
    """
    global _sash_size, _sash_hover_size
    _sash_size = clamp(size, MIN_SASH_SIZE, MAX_SASH_SIZE)
    _sash_hover_size = clamp(size, MIN_SASH_HOVER_SIZE, MAX_SASH_HOVER_SIZE)
    logger.debug(f"Sash size set to {_sash_size} (hover {_sash_hover_size})")


def get_sash_size() -> float:
    return _sash_size


def get_sash_hover_size() -> float:
    return _sash_hover_size
