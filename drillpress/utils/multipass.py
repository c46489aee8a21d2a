"""Multi-pass depth calculation utilities."""
import math
from typing import Iterator, Tuple

# Deepest single pocket pass, in work units
MAX_POCKET_PASS_DEPTH = 0.25


def pocket_pass_cap(diameter: float) -> float:
    """
    Maximum depth per helical pocket pass for a given hole diameter.

    Half the diameter, never more than MAX_POCKET_PASS_DEPTH.
    """
    return min(diameter * 0.5, MAX_POCKET_PASS_DEPTH)


def calculate_num_passes(total_depth: float, pass_depth: float) -> int:
    """
    Calculate the number of passes needed for a given depth.

    Args:
        total_depth: Total depth to cut (work units)
        pass_depth: Maximum depth per pass (work units)

    Returns:
        Number of passes required (at least 1)
    """
    if pass_depth <= 0:
        return 1
    return max(1, math.ceil(total_depth / pass_depth))


def iter_passes(total_depth: float, pass_depth: float) -> Iterator[Tuple[int, float, float]]:
    """
    Iterate over equal passes.

    Args:
        total_depth: Total depth to cut (work units)
        pass_depth: Maximum depth per pass (work units)

    Yields:
        Tuple of (pass_num, cumulative_depth, per_pass_depth):
        - pass_num: One-indexed pass number
        - cumulative_depth: Total depth at end of this pass
        - per_pass_depth: Depth increment per pass (same for all passes)
    """
    num_passes = calculate_num_passes(total_depth, pass_depth)
    per_pass = total_depth / num_passes
    for i in range(1, num_passes + 1):
        yield i, per_pass * i, per_pass

