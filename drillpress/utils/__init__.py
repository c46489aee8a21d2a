"""Shared utility modules for toolpath generation."""

from .multipass import (
    calculate_num_passes,
    iter_passes,
    pocket_pass_cap
)
from .sbp_format import (
    format_number,
    comment,
    declare_variable,
    jog_xy,
    jog_z_safe,
    move_xy,
    move_z,
    helical_circle,
    generate_header,
    generate_init,
    generate_footer
)
from .validators import (
    validate_config,
    get_config_warnings,
    validate_holes_in_envelope
)

__all__ = [
    # multipass
    'calculate_num_passes',
    'iter_passes',
    'pocket_pass_cap',
    # sbp_format
    'format_number',
    'comment',
    'declare_variable',
    'jog_xy',
    'jog_z_safe',
    'move_xy',
    'move_z',
    'helical_circle',
    'generate_header',
    'generate_init',
    'generate_footer',
    # validators
    'validate_config',
    'get_config_warnings',
    'validate_holes_in_envelope',
]
