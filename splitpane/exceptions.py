"""Custom exception hierarchy for splitpane.

Exception Hierarchy:
    SplitPaneError (base)
    ├── InvalidIndexError - index outside the pane sequence
    ├── SizeMismatchError - bulk resize with the wrong number of sizes
    ├── SizeSumMismatchError - bulk resize whose sizes do not fill the container
    ├── NotSnappableError - visibility toggle on a pane without snap
    ├── PaneConfigError - invalid pane constraints
    ├── LayoutConfigError - malformed layout declarations / files
    └── PaneNotFoundError - unknown pane id in a controller

Constraint conflicts (a requested size outside a pane's bounds, not enough
room to honour a resize) are not errors: the engine clamps and cascades.

Usage:
    from splitpane.exceptions import InvalidIndexError

    try:
        split_view.remove_view(7)
    except InvalidIndexError as e:
        print(e.context["index"])
"""

from typing import Any


class SplitPaneError(Exception):
    """Base exception for all splitpane errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (indexes, sizes)
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# Engine Errors
# =============================================================================


class InvalidIndexError(SplitPaneError, IndexError):
    """An index does not address a pane (or an insertion slot)."""

    def __init__(
        self,
        message: str = "Index out of range",
        *,
        index: int,
        length: int,
        **context: Any,
    ) -> None:
        context["index"] = index
        context["length"] = length
        super().__init__(message, **context)


class SizeMismatchError(SplitPaneError, ValueError):
    """Bulk resize received a different number of sizes than panes."""

    def __init__(
        self,
        message: str = "Number of sizes does not match number of panes",
        *,
        expected: int,
        actual: int,
        **context: Any,
    ) -> None:
        context["expected"] = expected
        context["actual"] = actual
        super().__init__(message, **context)


class SizeSumMismatchError(SplitPaneError, ValueError):
    """Bulk resize sizes do not add up to the container size."""

    def __init__(
        self,
        message: str = "Sizes do not add up to the container size",
        *,
        expected: float,
        actual: float,
        **context: Any,
    ) -> None:
        context["expected"] = expected
        context["actual"] = actual
        super().__init__(message, **context)


class NotSnappableError(SplitPaneError):
    """Visibility can only be toggled on snap-enabled panes."""

    def __init__(
        self, message: str = "Pane does not support snapping", *, index: int, **context: Any
    ) -> None:
        context["index"] = index
        super().__init__(message, **context)


class LastVisiblePaneError(SplitPaneError):
    """Collapsing the only visible pane would leave the container unfilled."""

    def __init__(
        self, message: str = "Cannot hide the last visible pane", *, index: int, **context: Any
    ) -> None:
        context["index"] = index
        super().__init__(message, **context)


# =============================================================================
# Configuration Errors
# =============================================================================


class PaneConfigError(SplitPaneError, ValueError):
    """Pane constraints are inconsistent (negative minimum, maximum below minimum)."""

    pass


class LayoutConfigError(SplitPaneError, ValueError):
    """A layout declaration or layout file is malformed."""

    pass


class PaneNotFoundError(SplitPaneError, KeyError):
    """No pane with the given id exists in the controller."""

    def __init__(self, pane_id: str, **context: Any) -> None:
        self.pane_id = pane_id
        super().__init__(f"Pane '{pane_id}' not found", **context)

    def __str__(self) -> str:
        return self._format_message()
