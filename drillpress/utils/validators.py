"""Drilling configuration validation utilities."""
import math
from typing import List, Optional, Sequence

from ..models import DrillConfig, DrillType, Hole, MachineEnvelope

LARGE_DIAMETER = 3.0
MAX_DEPTH_TO_DIAMETER = 3.0


def _is_positive(value) -> bool:
    return value is not None and math.isfinite(value) and value > 0


def validate_config(config: DrillConfig) -> List[str]:
    """
    Check a drilling configuration for physical sanity.

    Never raises; every problem found is reported so the caller can show
    them all at once. Hole positions are not checked here.

    Args:
        config: Drilling configuration

    Returns:
        List of error messages (empty if valid)
    """
    errors = []

    if not _is_positive(config.diameter):
        errors.append("Diameter must be greater than 0")

    if not _is_positive(config.depth):
        errors.append("Depth must be greater than 0")

    if config.drill_type == DrillType.COUNTERBORE:
        diameter = config.diameter if _is_positive(config.diameter) else 0.0
        if not _is_positive(config.cb_diameter) or config.cb_diameter <= diameter:
            errors.append("Counterbore diameter must be larger than hole diameter")
        if not _is_positive(config.cb_depth):
            errors.append("Counterbore depth must be greater than 0")

    return errors


def get_config_warnings(
    config: DrillConfig,
    envelope: Optional[MachineEnvelope] = None
) -> List[str]:
    """
    Non-blocking warnings about a drilling configuration.

    Args:
        config: Drilling configuration
        envelope: Machine travel limits, when known

    Returns:
        List of warning messages
    """
    warnings = []
    diameter = config.diameter
    depth = config.depth

    if envelope is not None and _is_positive(depth) and depth > abs(envelope.z_min):
        warnings.append(f"Depth exceeds Z travel ({abs(envelope.z_min)}\")")

    if _is_positive(diameter) and diameter > LARGE_DIAMETER:
        warnings.append("Large diameter - consider using pocket mode")

    if _is_positive(diameter) and _is_positive(depth) and depth / diameter > MAX_DEPTH_TO_DIAMETER:
        warnings.append("Deep hole - may need peck drilling")

    return warnings


def validate_holes_in_envelope(
    holes: Sequence[Hole],
    envelope: MachineEnvelope
) -> List[str]:
    """
    Check that every hole lies within machine XY travel.

    Args:
        holes: Holes to check
        envelope: Machine travel limits

    Returns:
        List of error messages for out-of-bounds holes (empty if all valid)
    """
    errors = []
    for i, hole in enumerate(holes, start=1):
        if not envelope.contains(hole.x, hole.y):
            number = hole.number or i
            errors.append(
                f"Hole {number} at ({hole.x:.3f}, {hole.y:.3f}) is outside machine travel "
                f"X[{envelope.x_min}, {envelope.x_max}] Y[{envelope.y_min}, {envelope.y_max}]"
            )
    return errors
