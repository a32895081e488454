"""
Layout configuration dataclasses.

Defines the structure for split layouts that can be loaded from YAML or
defined in Python code. A layout lists its panes with their constraints and
optionally the sizes to start with.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from ..exceptions import LayoutConfigError, PaneConfigError
from .pane import LayoutPriority
from .sash import Orientation
from .sizing import PreferredSize


def _optional_number(data: Dict[str, Any], key: str) -> Optional[float]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, str) and value.strip().lower() in ("inf", "infinity", ".inf"):
        return math.inf
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise LayoutConfigError(f"'{key}' must be a number", value=value)
    return value


@dataclass
class PaneSpec:
    """Specification for a pane within a layout.

    Unset values fall back to the layout-wide defaults, then to the pane
    defaults.

    Attributes:
        pane_id: Unique ID for this pane
        min_size: Minimum size
        max_size: Maximum size
        preferred_size: Size to use when added or reset ("120px", "40%", 120)
        priority: "low", "normal" or "high"
        snap: Whether the pane can collapse to zero
        visible: Declared visibility (only meaningful for snap panes)
    """

    pane_id: str
    min_size: Optional[float] = None
    max_size: Optional[float] = None
    preferred_size: Optional[Union[float, str]] = None
    priority: Optional[str] = None
    snap: Optional[bool] = None
    visible: Optional[bool] = None

    def __post_init__(self) -> None:
        """Validate the pane declaration."""
        if not self.pane_id:
            raise LayoutConfigError("Pane id must not be empty")
        if self.min_size is not None and self.min_size < 0:
            raise LayoutConfigError("min_size must be non-negative", pane=self.pane_id)
        if self.min_size is not None and self.max_size is not None and self.max_size < self.min_size:
            raise LayoutConfigError("max_size is below min_size", pane=self.pane_id)
        if self.priority is not None:
            try:
                LayoutPriority.from_value(self.priority)
            except PaneConfigError as e:
                raise LayoutConfigError(e.message, pane=self.pane_id) from e

    @property
    def preferred(self) -> PreferredSize:
        return PreferredSize.parse(self.preferred_size)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PaneSpec":
        """Create a PaneSpec from a dictionary (e.g., from YAML).

        Args:
            data: Dictionary with pane configuration

        Returns:
            PaneSpec instance
        """
        if "id" not in data:
            raise LayoutConfigError("Pane entry is missing 'id'", entry=data)

        return cls(
            pane_id=str(data["id"]),
            min_size=_optional_number(data, "min_size"),
            max_size=_optional_number(data, "max_size"),
            preferred_size=data.get("preferred_size"),
            priority=data.get("priority"),
            snap=data.get("snap"),
            visible=data.get("visible"),
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"id": self.pane_id}
        for key in ("min_size", "max_size", "preferred_size", "priority", "snap", "visible"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        return result


@dataclass
class SplitLayoutSpec:
    """Complete split layout configuration.

    Attributes:
        name: Unique name for this layout
        panes: Panes in layout order
        vertical: Stack panes top to bottom instead of left to right
        proportional_layout: Keep each pane's share when the container resizes
        default_sizes: Initial size of each pane (must match the pane count)
        min_size: Default minimum size of every pane
        max_size: Default maximum size of every pane
        snap: Default snap behaviour of every pane
        description: Human-readable description
        version: Layout schema version for compatibility
    """

    name: str
    panes: List[PaneSpec]
    vertical: bool = False
    proportional_layout: bool = True
    default_sizes: Optional[List[float]] = None
    min_size: Optional[float] = None
    max_size: Optional[float] = None
    snap: Optional[bool] = None
    description: str = ""
    version: str = "1.0"

    def __post_init__(self) -> None:
        """Validate and normalise the layout declaration."""
        if not self.panes:
            raise LayoutConfigError("Layout must have at least one pane", layout=self.name)

        self.panes = [PaneSpec.from_dict(p) if isinstance(p, dict) else p for p in self.panes]

        if self.default_sizes is not None:
            for size in self.default_sizes:
                if isinstance(size, bool) or not isinstance(size, (int, float)) or size < 0:
                    raise LayoutConfigError(
                        "default_sizes must be non-negative numbers", layout=self.name
                    )

    @property
    def orientation(self) -> Orientation:
        return Orientation.VERTICAL if self.vertical else Orientation.HORIZONTAL

    def get_pane(self, pane_id: str) -> Optional[PaneSpec]:
        for pane in self.panes:
            if pane.pane_id == pane_id:
                return pane
        return None

    def resolve(self, pane: PaneSpec) -> Dict[str, Any]:
        """Effective pane options, pane values first then layout defaults.

        Returns:
            Keyword arguments for ``Pane``
        """
        return {
            "minimum_size": pane.min_size if pane.min_size is not None else self.min_size,
            "maximum_size": pane.max_size if pane.max_size is not None else self.max_size,
            "priority": pane.priority,
            "preferred_size": pane.preferred_size,
            "snap": pane.snap if pane.snap is not None else self.snap,
        }

    @classmethod
    def from_dict(cls, name: str, data: Dict[str, Any]) -> "SplitLayoutSpec":
        """Create a SplitLayoutSpec from a dictionary (e.g., from YAML).

        Args:
            name: Layout name
            data: Dictionary with layout configuration

        Returns:
            SplitLayoutSpec instance
        """
        panes = data.get("panes")
        if not isinstance(panes, list):
            raise LayoutConfigError("Layout needs a 'panes' list", layout=name)

        default_sizes = data.get("default_sizes")
        if default_sizes is None and "ratio" in data:
            # Ratio like [40, 60] is turned into default sizes of the same proportions
            default_sizes = list(data["ratio"])

        return cls(
            name=name,
            panes=[PaneSpec.from_dict(p) for p in panes],
            vertical=bool(data.get("vertical", False)),
            proportional_layout=bool(data.get("proportional_layout", True)),
            default_sizes=default_sizes,
            min_size=_optional_number(data, "min_size"),
            max_size=_optional_number(data, "max_size"),
            snap=data.get("snap"),
            description=data.get("description", ""),
            version=str(data.get("version", "1.0")),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert layout config to a dictionary for serialization.

        Returns:
            Dictionary representation suitable for YAML/JSON
        """
        result: Dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "version": self.version,
            "vertical": self.vertical,
            "proportional_layout": self.proportional_layout,
        }
        if self.default_sizes is not None:
            result["default_sizes"] = list(self.default_sizes)
        for key in ("min_size", "max_size", "snap"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        result["panes"] = [pane.to_dict() for pane in self.panes]
        return result
