"""Toolpath generation service."""
import math
from typing import Any, Dict, List, Optional, Tuple

from drillpress.models import DrillConfig, Hole
from drillpress.pattern_expander import (
    check_array_parameters,
    check_circle_parameters,
    expand_hole_operations,
    renumber_holes
)
from drillpress.program_assembler import DrillProgramGenerator
from drillpress.tour_optimizer import optimize_order, travel_distance
from drillpress.utils.validators import (
    validate_config,
    get_config_warnings,
    validate_holes_in_envelope
)
from web.services.settings_service import SettingsService

_CONFIG_NUMBER_FIELDS = (
    'diameter', 'depth', 'cb_diameter', 'cb_depth',
    'safe_z', 'feed_rate', 'plunge_rate', 'material_thickness'
)

_OPERATION_NUMBER_FIELDS = (
    'x', 'y', 'spacing_x', 'spacing_y', 'origin_x', 'origin_y',
    'radius', 'center_x', 'center_y', 'start_angle', 'diameter', 'depth'
)

_TRUE_STRINGS = ('true', '1', 'yes', 'on')
_FALSE_STRINGS = ('false', '0', 'no', 'off')


class PayloadError(ValueError):
    """Raised when request data cannot be turned into holes or a config."""


def _to_float(value: Any, field: str) -> Optional[float]:
    if value is None or value == '':
        return None
    if isinstance(value, bool):
        raise PayloadError(f"{field} must be a number")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise PayloadError(f"{field} must be a number, got {value!r}")


def _to_int(value: Any, field: str) -> Optional[int]:
    if value is None or value == '':
        return None
    number = _to_float(value, field)
    if not number.is_integer():
        raise PayloadError(f"{field} must be a whole number, got {value!r}")
    return int(number)


def _to_bool(value: Any, field: str, default: bool = True) -> bool:
    if value is None or value == '':
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)) and value in (0, 1):
        return bool(value)
    if isinstance(value, str) and value.strip().lower() in _TRUE_STRINGS:
        return True
    if isinstance(value, str) and value.strip().lower() in _FALSE_STRINGS:
        return False
    raise PayloadError(f"{field} must be true or false, got {value!r}")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and not math.isnan(value)


class ToolpathService:
    """Service for drill program validation and generation."""

    @staticmethod
    def parse_config(data: Optional[Dict]) -> DrillConfig:
        """
        Build a DrillConfig from request data.

        Accepts snake_case or camelCase keys. Numeric fields may be sent as
        strings (form values); blanks are treated as missing.
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise PayloadError("config must be an object")

        config = DrillConfig.from_dict(data)
        for field in _CONFIG_NUMBER_FIELDS:
            setattr(config, field, _to_float(getattr(config, field), field))
        config.return_home = _to_bool(config.return_home, 'return_home')
        return config

    @staticmethod
    def parse_holes(items: Optional[List], config: Optional[DrillConfig] = None) -> List[Hole]:
        """
        Build holes from a list of dicts with x, y and optional diameter/depth.

        Missing diameter/depth are filled from the config. Missing sequence
        numbers are assigned from list position.
        """
        if items is None:
            return []
        if not isinstance(items, list):
            raise PayloadError("holes must be a list")

        default_diameter = config.diameter if config else None
        default_depth = config.depth if config else None

        holes = []
        for i, item in enumerate(items, start=1):
            if not isinstance(item, dict) or 'x' not in item or 'y' not in item:
                raise PayloadError(f"Hole {i} needs x and y coordinates")
            x = _to_float(item['x'], f"Hole {i} x")
            y = _to_float(item['y'], f"Hole {i} y")
            if x is None or y is None or not math.isfinite(x) or not math.isfinite(y):
                raise PayloadError(f"Hole {i} has invalid coordinates")

            diameter = _to_float(item.get('diameter'), f"Hole {i} diameter")
            depth = _to_float(item.get('depth'), f"Hole {i} depth")
            holes.append(Hole(
                x=x,
                y=y,
                diameter=default_diameter if diameter is None else diameter,
                depth=default_depth if depth is None else depth,
                number=_to_int(item.get('number'), f"Hole {i} number") or i
            ))
        return holes

    @staticmethod
    def expand_patterns(operations: Optional[List], config: Optional[DrillConfig] = None) -> List[Hole]:
        """
        Expand single/array/circle operations into holes.

        Pattern parameters are checked here, at the input boundary, so the
        generators only ever see valid values.

        Raises:
            PayloadError: If any operation is malformed
        """
        if not operations:
            return []
        if not isinstance(operations, list):
            raise PayloadError("operations must be a list")

        errors = []
        normalized = []
        for i, op in enumerate(operations, start=1):
            if not isinstance(op, dict):
                errors.append(f"Operation {i}: must be an object")
                continue

            op = dict(op)
            problems = []
            for field in _OPERATION_NUMBER_FIELDS:
                if field not in op:
                    continue
                try:
                    value = _to_float(op[field], field)
                except PayloadError as e:
                    problems.append(str(e))
                    continue
                if value is None:
                    del op[field]
                elif not math.isfinite(value):
                    problems.append(f"{field} must be a finite number")
                else:
                    op[field] = value
            if problems:
                errors.extend(f"Operation {i}: {p}" for p in problems)
                continue
            normalized.append(op)

            op_type = op.get('type', 'single')
            if op_type == 'single':
                if not _is_number(op.get('x')) or not _is_number(op.get('y')):
                    errors.append(f"Operation {i}: Invalid coordinates")
            elif op_type == 'array':
                problems = check_array_parameters(
                    op.get('rows'), op.get('cols'),
                    op.get('spacing_x'), op.get('spacing_y')
                )
                errors.extend(f"Operation {i}: {p}" for p in problems)
            elif op_type in ('circle', 'arc'):
                problems = check_circle_parameters(op.get('count'), op.get('radius'))
                errors.extend(f"Operation {i}: {p}" for p in problems)
            else:
                errors.append(f"Operation {i}: Unknown operation type '{op_type}'")

        if errors:
            raise PayloadError('; '.join(errors))

        return expand_hole_operations(
            normalized,
            diameter=config.diameter if config else None,
            depth=config.depth if config else None
        )

    @staticmethod
    def parse_job(data: Optional[Dict]) -> Tuple[List[Hole], DrillConfig]:
        """
        Parse a job payload: {"config": {...}, "holes": [...], "operations": [...]}.

        Explicit holes come first, followed by expanded pattern operations;
        the combined list is renumbered from 1.
        """
        if not isinstance(data, dict):
            raise PayloadError("Request body must be a JSON object")

        config = ToolpathService.parse_config(data.get('config'))
        holes = ToolpathService.parse_holes(data.get('holes'), config)
        patterned = ToolpathService.expand_patterns(data.get('operations'), config)
        if patterned:
            holes = renumber_holes(holes + patterned)
        return holes, config

    @staticmethod
    def validate(holes: List[Hole], config: DrillConfig) -> List[str]:
        """
        Validate a job before generating a program.

        Returns list of error messages (empty if valid).
        """
        errors = []
        if not holes:
            errors.append("No holes to drill")
        errors.extend(validate_config(config))
        errors.extend(validate_holes_in_envelope(holes, SettingsService.get_machine_envelope()))
        return errors

    @staticmethod
    def get_validation_warnings(config: DrillConfig) -> List[str]:
        """Non-blocking warnings for a drilling configuration."""
        return get_config_warnings(config, SettingsService.get_machine_envelope())

    @staticmethod
    def generate(holes: List[Hole], config: DrillConfig) -> str:
        """
        Generate program text with the host's default settings.

        Raises:
            NoHolesError: If holes is empty
        """
        generator = DrillProgramGenerator(SettingsService.get_settings())
        return generator.generate(holes, config)

    @staticmethod
    def optimize(holes: List[Hole]) -> Dict:
        """Return the visiting order and travel distances for preview."""
        ordered = optimize_order(holes)
        return {
            'holes': [hole.to_dict() for hole in ordered],
            'original_distance': travel_distance(holes),
            'optimized_distance': travel_distance(ordered)
        }

    @staticmethod
    def download_filename(holes: List[Hole]) -> str:
        """File name for a downloaded program."""
        return f"drill_press_{len(holes)}_holes.sbp"
