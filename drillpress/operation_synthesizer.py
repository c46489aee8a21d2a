"""Per-hole cutting sequences.

Each synthesizer turns one hole and the run's DrillConfig into OpenSBP
lines. Inputs are expected to have passed ``validate_config``; nothing is
re-checked here.
"""
from typing import Callable, Dict, List

from .models import DrillConfig, DrillType, Hole
from .utils.multipass import iter_passes, pocket_pass_cap
from .utils.sbp_format import (
    comment,
    format_number,
    helical_circle,
    jog_xy,
    jog_z_safe,
    move_xy,
    move_z,
)


def synthesize_plunge(hole: Hole, diameter: float, depth: float) -> List[str]:
    """Straight plunge: position, drill to depth, retract."""
    return [
        jog_xy(hole.x, hole.y, "Position over hole"),
        move_z(-abs(depth), "Plunge to depth"),
        jog_z_safe("Retract to safe Z"),
    ]


def synthesize_pocket(hole: Hole, diameter: float, depth: float) -> List[str]:
    """
    Helical pocket: equal depth passes, one full circle per pass.

    Per-pass depth is capped at half the diameter (max 0.25) and then
    evened out so every pass removes the same depth. Zero-radius holes
    plunge straight down each pass instead of circling.
    """
    lines = []
    total_depth = abs(depth)
    radius = diameter / 2
    passes = list(iter_passes(total_depth, pocket_pass_cap(diameter)))

    lines.append(comment(f"Pocket hole: {len(passes)} depth passes"))
    lines.append(jog_xy(hole.x, hole.y, "Move to center"))

    for pass_num, cumulative_depth, _ in passes:
        z = -cumulative_depth
        lines.append(comment(f'Depth pass {pass_num} to {format_number(z)}"'))

        if radius > 0:
            edge_x = hole.x + radius
            lines.append(move_xy(edge_x, hole.y, "Move to circle edge"))
            lines.append(helical_circle(edge_x, hole.y, -radius, 0, z, "Helical circle to depth"))
            lines.append(move_xy(hole.x, hole.y, "Return to center"))
        else:
            lines.append(move_z(z, "Plunge to pass depth"))

    lines.append(jog_z_safe("Retract to safe Z"))
    return lines


def synthesize_counterbore(hole: Hole, config: DrillConfig) -> List[str]:
    """
    Pilot hole plus a concentric pocket.

    Without both counterbore dimensions only the pilot hole is cut.
    """
    lines = [comment("Drilling pilot hole")]
    lines.extend(synthesize_plunge(hole, config.diameter or 0.0, config.depth or 0.0))

    if config.cb_diameter and config.cb_depth:
        lines.append('')
        lines.append(comment("Counterbore pocket"))
        lines.extend(synthesize_pocket(hole, config.cb_diameter, config.cb_depth))

    return lines


def _plunge(hole: Hole, config: DrillConfig) -> List[str]:
    return synthesize_plunge(hole, config.diameter or 0.0, config.depth or 0.0)


def _pocket(hole: Hole, config: DrillConfig) -> List[str]:
    return synthesize_pocket(hole, config.diameter or 0.0, config.depth or 0.0)


SYNTHESIZERS: Dict[DrillType, Callable[[Hole, DrillConfig], List[str]]] = {
    DrillType.THROUGH: _plunge,
    DrillType.BLIND: _plunge,
    DrillType.POCKET: _pocket,
    DrillType.COUNTERBORE: synthesize_counterbore,
}


def synthesize_hole(hole: Hole, config: DrillConfig) -> List[str]:
    """
    Generate the cutting sequence for one hole.

    Unrecognized drill types fall back to a straight plunge.

    Args:
        hole: Hole to machine
        config: Drilling configuration for the run

    Returns:
        List of OpenSBP lines
    """
    synthesizer = SYNTHESIZERS.get(config.drill_type, _plunge)
    return synthesizer(hole, config)
