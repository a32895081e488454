"""Container extent shared between a split view and its panes."""


class LayoutContext:
    """Holds the current container size along the layout axis.

    Written by the split view on every layout pass and read by panes whose
    preferred size is a percentage of the container.
    """

    def __init__(self, size: float = 0) -> None:
        self._size = size

    def get_size(self) -> float:
        return self._size

    def set_size(self, size: float) -> None:
        self._size = size

    def __repr__(self) -> str:
        return f"LayoutContext(size={self._size!r})"
