"""
Pure size-distribution functions.

Every function takes the current sizes and a matching list of ``Bounds``
snapshots and returns a new list; nothing is mutated in place. The split
view composes these into its operations and adds visibility handling and
notifications on top.

Terminology:
    order   - the sequence in which panes are asked to absorb a delta
    cascade - applying a delta pane by pane, each taking what its bounds
              allow and passing the rest on
"""

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from .pane import LayoutPriority

Sizes = List[float]

_PRIORITY_TIERS = (LayoutPriority.HIGH, LayoutPriority.NORMAL, LayoutPriority.LOW)


@dataclass(frozen=True)
class Bounds:
    """Effective constraints of one pane for a single layout pass.

    A collapsed snap pane is represented with both bounds at 0.
    """

    minimum: float = 0
    maximum: float = math.inf
    priority: LayoutPriority = LayoutPriority.NORMAL


def clamp(value: float, minimum: float, maximum: float) -> float:
    return min(max(value, minimum), maximum)


def _half(amount: float) -> float:
    """Half of ``amount``, truncated toward zero for integers."""
    if isinstance(amount, int):
        return int(amount / 2)
    return amount / 2


def priority_order(bounds: Sequence[Bounds], indexes: Iterable[int]) -> List[int]:
    """Stable reorder of ``indexes`` into HIGH, NORMAL, LOW tiers."""
    indexes = list(indexes)
    return [i for tier in _PRIORITY_TIERS for i in indexes if bounds[i].priority is tier]


def cascade(
    sizes: Sequence[float],
    bounds: Sequence[Bounds],
    order: Iterable[int],
    delta: float,
) -> Tuple[Sizes, float]:
    """Apply ``delta`` to the panes in ``order`` until it is used up.

    Returns:
        Tuple of (new sizes, part of the delta no pane could absorb)
    """
    result = list(sizes)
    remaining = delta
    for index in order:
        if remaining == 0:
            break
        item = bounds[index]
        size = clamp(result[index] + remaining, item.minimum, item.maximum)
        remaining -= size - result[index]
        result[index] = size
    return result, remaining


def distribute_empty_space(
    sizes: Sequence[float],
    bounds: Sequence[Bounds],
    total: float,
    order: Optional[Iterable[int]] = None,
) -> Sizes:
    """Grow or shrink panes in ``order`` until they add up to ``total``.

    Space that no pane can take within its bounds is left over.
    """
    if order is None:
        order = priority_order(bounds, range(len(sizes)))
    result, _ = cascade(sizes, bounds, order, total - sum(sizes))
    return result


def boundary_delta_range(
    sizes: Sequence[float],
    bounds: Sequence[Bounds],
    index: int,
    maximums: Optional[Sequence[float]] = None,
) -> Tuple[float, float]:
    """How far the boundary after pane ``index`` can move.

    Args:
        sizes: Current sizes
        bounds: Current bounds
        index: Pane before the boundary
        maximums: Optional per-pane maximums overriding ``bounds`` (used to
            let collapsed panes count with their natural maximum)

    Returns:
        Tuple of (smallest delta, largest delta); positive moves the
        boundary toward the end of the sequence
    """
    if maximums is None:
        maximums = [b.maximum for b in bounds]
    up = range(index, -1, -1)
    down = range(index + 1, len(sizes))

    min_delta_up = sum(bounds[i].minimum - sizes[i] for i in up)
    max_delta_up = sum(maximums[i] - sizes[i] for i in up)
    if len(down) == 0:
        max_delta_down, min_delta_down = math.inf, -math.inf
    else:
        max_delta_down = sum(sizes[i] - bounds[i].minimum for i in down)
        min_delta_down = sum(sizes[i] - maximums[i] for i in down)

    return max(min_delta_up, min_delta_down), min(max_delta_up, max_delta_down)


def resize_boundary(
    sizes: Sequence[float],
    bounds: Sequence[Bounds],
    index: int,
    delta: float,
) -> Tuple[Sizes, float]:
    """Move the boundary between pane ``index`` and ``index + 1`` by ``delta``.

    Pane ``index`` grows by the delta (shrinks when negative) and pane
    ``index + 1`` takes the opposite. When a pane saturates the rest of the
    delta cascades outward: ``index - 1``, ``index - 2``... on one side and
    ``index + 2``... on the other. The delta is truncated to what both sides
    can absorb.

    Returns:
        Tuple of (new sizes, delta actually applied)
    """
    if not 0 <= index < len(sizes):
        return list(sizes), 0

    min_delta, max_delta = boundary_delta_range(sizes, bounds, index)
    delta = clamp(delta, min_delta, max_delta)

    result, _ = cascade(sizes, bounds, range(index, -1, -1), delta)
    result, _ = cascade(result, bounds, range(index + 1, len(sizes)), -delta)
    return result, delta


def push_to_neighbors(
    sizes: Sequence[float],
    bounds: Sequence[Bounds],
    index: int,
    amount: float,
) -> Tuple[Sizes, float]:
    """Hand ``amount`` to the panes around ``index`` (negative takes space).

    The amount is split between the nearest neighbour on each side; each
    side cascades outward only when its nearest pane saturates, and a
    saturated side passes its remainder to the other side.

    Returns:
        Tuple of (new sizes, amount nobody could absorb)
    """
    before = list(range(index - 1, -1, -1))
    after = list(range(index + 1, len(sizes)))

    if before and after:
        before_share = _half(amount)
        after_share = amount - before_share
    elif before:
        before_share, after_share = amount, 0
    else:
        before_share, after_share = 0, amount

    result, rest = cascade(sizes, bounds, before, before_share)
    result, rest = cascade(result, bounds, after, after_share + rest)
    if rest:
        result, rest = cascade(result, bounds, before, rest)
    return result, rest


def resize_pane(
    sizes: Sequence[float],
    bounds: Sequence[Bounds],
    index: int,
    target: float,
) -> Sizes:
    """Set pane ``index`` to ``target``, taking or giving space to its neighbours.

    The target is clamped to the pane's bounds and to what the other panes
    can give (or take) within theirs, so the total stays the same.
    """
    others = [i for i in range(len(sizes)) if i != index]
    target = clamp(target, bounds[index].minimum, bounds[index].maximum)
    delta = target - sizes[index]

    if delta > 0:
        capacity = sum(max(sizes[i] - bounds[i].minimum, 0) for i in others)
        delta = min(delta, capacity)
    elif delta < 0:
        capacity = sum(max(bounds[i].maximum - sizes[i], 0) for i in others)
        delta = max(delta, -capacity)

    result = list(sizes)
    result[index] = sizes[index] + delta
    result, _ = push_to_neighbors(result, bounds, index, -delta)
    return result


def proportional_sizes(
    proportions: Sequence[float],
    bounds: Sequence[Bounds],
    total: float,
    order: Optional[Iterable[int]] = None,
) -> Sizes:
    """Size each pane as its share of ``total``, clamped, residual cascaded."""
    result = [
        clamp(round(proportion * total), item.minimum, item.maximum)
        for proportion, item in zip(proportions, bounds)
    ]
    return distribute_empty_space(result, bounds, total, order)


def even_sizes(
    bounds: Sequence[Bounds],
    total: float,
    order: Optional[Iterable[int]] = None,
) -> Sizes:
    """Give every pane an equal share of ``total`` within its bounds.

    Panes whose bounds cannot hold the current share are pinned at the
    violated bound and the remaining panes split what is left, repeating
    until every unpinned pane accepts the share. Each round pins at least
    one more pane or finishes, so the loop terminates.
    """
    result: Sizes = [0] * len(bounds)
    free = [i for i, item in enumerate(bounds) if item.maximum > 0]
    remaining = total

    while free:
        share = remaining / len(free)
        pinned = [i for i in free if not bounds[i].minimum <= share <= bounds[i].maximum]
        if not pinned:
            break
        for i in pinned:
            result[i] = clamp(share, bounds[i].minimum, bounds[i].maximum)
            remaining -= result[i]
        free = [i for i in free if i not in pinned]

    if free:
        share = remaining / len(free)
        if isinstance(total, int):
            share = math.floor(share)
        for i in free:
            result[i] = share

    return distribute_empty_space(result, bounds, total, order)
