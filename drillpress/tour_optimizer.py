"""Hole visiting order.

Greedy nearest-neighbor tour: start at the hole closest to the origin,
then always jog to the closest unvisited hole. This is a heuristic, not
an optimal solution; ties go to the hole that appears first in the input.
"""
import math
from typing import List, Sequence, Tuple

from .models import Hole


def distance(a: Hole, b: Hole) -> float:
    """Straight-line XY distance between two holes."""
    return math.hypot(b.x - a.x, b.y - a.y)


def optimize_order(holes: Sequence[Hole]) -> List[Hole]:
    """
    Order holes to shorten rapid travel between them.

    Args:
        holes: Holes in input order (not modified)

    Returns:
        New list containing every input hole exactly once
    """
    if len(holes) <= 1:
        return list(holes)

    remaining = list(holes)

    # min() keeps the first of equal candidates
    start = min(range(len(remaining)), key=lambda i: math.hypot(remaining[i].x, remaining[i].y))
    current = remaining.pop(start)
    ordered = [current]

    while remaining:
        nearest = min(range(len(remaining)), key=lambda i: distance(current, remaining[i]))
        current = remaining.pop(nearest)
        ordered.append(current)

    return ordered


def travel_distance(holes: Sequence[Hole], start: Tuple[float, float] = (0.0, 0.0)) -> float:
    """
    Total XY travel to visit holes in order, beginning at start.

    Args:
        holes: Holes in visiting order
        start: (x, y) position before the first hole

    Returns:
        Sum of straight-line segment lengths
    """
    total = 0.0
    x, y = start
    for hole in holes:
        total += math.hypot(hole.x - x, hole.y - y)
        x, y = hole.x, hole.y
    return total
