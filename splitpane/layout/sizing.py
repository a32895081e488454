"""
Preferred-size declarations for panes.

A pane may declare the size it would like to have as an absolute number of
units, as a percentage of the container or not at all. The declaration is
kept as a small tagged value and only turned into a number when the engine
asks for it, so percentages follow the container as it is resized.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from ..config.constants import ABSOLUTE_UNIT_SUFFIX, PERCENT_SUFFIX

if TYPE_CHECKING:
    from .context import LayoutContext

_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


class SizeKind(Enum):
    """Kinds of preferred-size declarations."""

    FIXED = "px"  # Absolute unit count
    PROPORTIONAL = "%"  # Fraction of the container
    UNSET = "unset"  # No preference


def _parse_number(text: str) -> Optional[float]:
    """Parse a plain decimal number, None for anything else."""
    text = text.strip()
    if not _NUMBER_RE.match(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


@dataclass(frozen=True)
class PreferredSize:
    """A pane's preferred-size strategy.

    Examples:
        >>> PreferredSize.parse(120)       # fixed 120 units
        >>> PreferredSize.parse("120px")   # fixed 120 units
        >>> PreferredSize.parse("40%")     # 40% of the container
        >>> PreferredSize.parse("wide")    # no preference
    """

    kind: SizeKind = SizeKind.UNSET
    value: float = 0.0

    @classmethod
    def fixed(cls, size: float) -> "PreferredSize":
        """Create an absolute preferred size."""
        return cls(SizeKind.FIXED, size)

    @classmethod
    def proportion(cls, fraction: float) -> "PreferredSize":
        """Create a preferred size relative to the container (0 < fraction <= 1)."""
        return cls(SizeKind.PROPORTIONAL, fraction)

    @classmethod
    def unset(cls) -> "PreferredSize":
        """Create an empty preference."""
        return cls()

    @classmethod
    def parse(cls, value: Any) -> "PreferredSize":
        """Build a strategy from a declared value.

        Numbers become fixed sizes, ``"N%"`` a proportion, ``"Npx"`` and bare
        numeric strings a fixed size. Anything else, including negative or
        out-of-range values, yields an unset preference; this never raises.

        Args:
            value: Number, string or None

        Returns:
            PreferredSize instance
        """
        if isinstance(value, PreferredSize):
            return value

        if isinstance(value, bool):
            return cls.unset()

        if isinstance(value, (int, float)):
            if math.isfinite(value) and value >= 0:
                return cls.fixed(value)
            return cls.unset()

        if not isinstance(value, str):
            return cls.unset()

        spec = value.strip().lower()

        if spec.endswith(PERCENT_SUFFIX):
            number = _parse_number(spec[: -len(PERCENT_SUFFIX)])
            if number is None or not 0 < number <= 100:
                return cls.unset()
            return cls.proportion(number / 100)

        if spec.endswith(ABSOLUTE_UNIT_SUFFIX):
            spec = spec[: -len(ABSOLUTE_UNIT_SUFFIX)]

        number = _parse_number(spec)
        if number is None or number < 0:
            return cls.unset()
        return cls.fixed(number)

    @property
    def is_set(self) -> bool:
        return self.kind is not SizeKind.UNSET

    def evaluate(self, context: Optional["LayoutContext"]) -> Optional[float]:
        """Compute the preferred size against the current container size.

        Args:
            context: Layout context holding the container size (only read
                for proportional sizes)

        Returns:
            Preferred size, or None when there is no preference
        """
        if self.kind is SizeKind.FIXED:
            return self.value
        if self.kind is SizeKind.PROPORTIONAL:
            container = context.get_size() if context is not None else 0
            return self.value * container
        return None

    def to_string(self) -> Optional[str]:
        """Render the declaration back to its string form."""
        if self.kind is SizeKind.FIXED:
            return f"{self.value:g}{ABSOLUTE_UNIT_SUFFIX}"
        if self.kind is SizeKind.PROPORTIONAL:
            return f"{self.value * 100:g}{PERCENT_SUFFIX}"
        return None
