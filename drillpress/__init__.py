"""Drill toolpath generation for CNC routers (OpenSBP output)."""

from .models import (
    DrillConfig,
    DrillType,
    Hole,
    MachineEnvelope,
    Settings
)
from .pattern_expander import (
    rectangular_array,
    circular_pattern,
    renumber_holes,
    expand_hole_operations
)
from .tour_optimizer import optimize_order, travel_distance
from .operation_synthesizer import synthesize_hole
from .program_assembler import (
    DrillProgramGenerator,
    NoHolesError,
    generate_program
)
from .utils.validators import validate_config, get_config_warnings

__all__ = [
    # Models
    'DrillConfig',
    'DrillType',
    'Hole',
    'MachineEnvelope',
    'Settings',
    # Pattern expansion
    'rectangular_array',
    'circular_pattern',
    'renumber_holes',
    'expand_hole_operations',
    # Tour
    'optimize_order',
    'travel_distance',
    # Generation
    'synthesize_hole',
    'DrillProgramGenerator',
    'NoHolesError',
    'generate_program',
    # Validation
    'validate_config',
    'get_config_warnings',
]
