"""Pattern expansion utilities for hole placement.

Expands pattern definitions (rectangular arrays, bolt circles) into
individual holes. The generators do not validate their arguments; use the
``check_*`` helpers at the input boundary first.
"""
import dataclasses
import math
from typing import Any, Dict, List, Optional

from .models import Hole


def rectangular_array(
    rows: int,
    cols: int,
    spacing_x: float,
    spacing_y: float,
    origin_x: float = 0.0,
    origin_y: float = 0.0,
    diameter: Optional[float] = None,
    depth: Optional[float] = None,
    start_number: int = 1
) -> List[Hole]:
    """
    Expand a rectangular array into individual holes.

    Holes are generated row by row (row-major order).

    Args:
        rows: Number of rows (Y direction)
        cols: Number of columns (X direction)
        spacing_x: Spacing between columns
        spacing_y: Spacing between rows
        origin_x: X coordinate of the first hole
        origin_y: Y coordinate of the first hole
        diameter: Hole diameter carried on each hole
        depth: Hole depth carried on each hole
        start_number: Sequence number of the first hole

    Returns:
        List of rows*cols holes
    """
    holes = []
    for row in range(rows):
        for col in range(cols):
            holes.append(Hole(
                x=origin_x + col * spacing_x,
                y=origin_y + row * spacing_y,
                diameter=diameter,
                depth=depth,
                number=start_number + len(holes)
            ))
    return holes


def circular_pattern(
    count: int,
    radius: float,
    center_x: float = 0.0,
    center_y: float = 0.0,
    start_angle: float = 0.0,
    diameter: Optional[float] = None,
    depth: Optional[float] = None,
    start_number: int = 1
) -> List[Hole]:
    """
    Expand a bolt-circle pattern into individual holes.

    Holes are evenly spaced counter-clockwise starting at start_angle.

    Args:
        count: Number of holes
        radius: Circle radius
        center_x: Circle center X
        center_y: Circle center Y
        start_angle: Angle of the first hole in degrees (0 = +X axis)
        diameter: Hole diameter carried on each hole
        depth: Hole depth carried on each hole
        start_number: Sequence number of the first hole

    Returns:
        List of count holes
    """
    step = 360 / count
    holes = []
    for i in range(count):
        angle = math.radians(start_angle + i * step)
        holes.append(Hole(
            x=center_x + radius * math.cos(angle),
            y=center_y + radius * math.sin(angle),
            diameter=diameter,
            depth=depth,
            number=start_number + i
        ))
    return holes


def renumber_holes(holes: List[Hole], start: int = 1) -> List[Hole]:
    """Return a copy of holes with sequence numbers reassigned in list order."""
    return [
        dataclasses.replace(hole, number=start + i)
        for i, hole in enumerate(holes)
    ]


def check_array_parameters(rows, cols, spacing_x, spacing_y) -> List[str]:
    """Return error messages for invalid array parameters (empty if valid)."""
    errors = []
    if not isinstance(rows, int) or not isinstance(cols, int) or rows < 1 or cols < 1:
        errors.append("Invalid array dimensions")
    if not _is_positive(spacing_x) or not _is_positive(spacing_y):
        errors.append("Invalid spacing values")
    return errors


def check_circle_parameters(count, radius) -> List[str]:
    """Return error messages for invalid circle pattern parameters."""
    errors = []
    if not isinstance(count, int) or count < 2:
        errors.append("Invalid hole count")
    if not _is_positive(radius):
        errors.append("Invalid radius")
    return errors


def _is_positive(value) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value) and value > 0


def expand_hole_operations(
    operations: List[Dict[str, Any]],
    diameter: Optional[float] = None,
    depth: Optional[float] = None
) -> List[Hole]:
    """
    Expand all hole operations to one numbered hole list.

    Supported operation types:
        - 'single': x, y
        - 'array': rows, cols, spacing_x, spacing_y, origin_x, origin_y
        - 'circle' (or 'arc'): count, radius, center_x, center_y, start_angle

    Operations may override diameter/depth; otherwise the given defaults
    are used. Unknown operation types are skipped.

    Args:
        operations: List of operation dicts
        diameter: Default hole diameter
        depth: Default hole depth

    Returns:
        List of holes numbered from 1 in expansion order
    """
    holes: List[Hole] = []

    for op in operations:
        op_type = op.get('type', 'single')
        op_diameter = op.get('diameter', diameter)
        op_depth = op.get('depth', depth)
        start = len(holes) + 1

        if op_type == 'single':
            holes.append(Hole(
                x=op['x'], y=op['y'],
                diameter=op_diameter, depth=op_depth,
                number=start
            ))

        elif op_type == 'array':
            holes.extend(rectangular_array(
                op['rows'], op['cols'],
                op['spacing_x'], op['spacing_y'],
                op.get('origin_x', 0.0), op.get('origin_y', 0.0),
                diameter=op_diameter, depth=op_depth,
                start_number=start
            ))

        elif op_type in ('circle', 'arc'):
            holes.extend(circular_pattern(
                op['count'], op['radius'],
                op.get('center_x', 0.0), op.get('center_y', 0.0),
                op.get('start_angle', 0.0),
                diameter=op_diameter, depth=op_depth,
                start_number=start
            ))

    return holes
