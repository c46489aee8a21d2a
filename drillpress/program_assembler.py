"""OpenSBP program assembly for drilling operations.

This module orchestrates program generation from a hole list, supporting:
- Nearest-neighbor ordering of holes before cutting
- Plunge, helical pocket and counterbore strategies per hole
- A single ``&safeZ`` variable referenced by every retract
"""
import logging
from datetime import datetime
from typing import List, Optional, Sequence

from .models import DrillConfig, Hole, Settings
from .operation_synthesizer import synthesize_hole
from .tour_optimizer import optimize_order
from .utils.sbp_format import (
    comment,
    format_number,
    generate_footer,
    generate_header,
    generate_init,
)

logger = logging.getLogger(__name__)


class NoHolesError(ValueError):
    """Raised when a program is requested for an empty hole list."""


class DrillProgramGenerator:
    """OpenSBP program generator for one set of host settings."""

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize the generator.

        Args:
            settings: Host defaults used where the DrillConfig is silent
        """
        self.settings = settings or Settings()

    def _resolve(self, value: Optional[float], default: float) -> float:
        return default if value is None else value

    def _generate_header(
        self,
        holes: Sequence[Hole],
        config: DrillConfig,
        generated_at: str
    ) -> List[str]:
        return generate_header(
            app_name=self.settings.app_name,
            description=f"Drilling {len(holes)} hole(s)",
            generated_at=generated_at,
            version=self.settings.app_version,
            units=self.settings.units,
            material_thickness=config.material_thickness,
            bit_diameter=config.diameter,
            notes=f'{config.type} holes, {format_number(config.depth or 0.0)}" deep'
        )

    def _generate_init(self, config: DrillConfig) -> List[str]:
        return generate_init(
            safe_z=self._resolve(config.safe_z, self.settings.safe_z),
            feed_rate=self._resolve(config.feed_rate, self.settings.feed_rate),
            plunge_rate=self._resolve(config.plunge_rate, self.settings.plunge_rate),
            depth=config.depth or 0.0,
            spindle_startup_time=self.settings.spindle_startup_time
        )

    def _generate_hole_operation(
        self,
        hole: Hole,
        position: int,
        config: DrillConfig
    ) -> List[str]:
        """Banner comment, cutting sequence and a blank separator for one hole."""
        lines = [
            comment(
                f"--- Hole {position} at "
                f"({format_number(hole.x)}, {format_number(hole.y)}) ---"
            )
        ]
        lines.extend(synthesize_hole(hole, config))
        lines.append('')
        return lines

    def generate(
        self,
        holes: Sequence[Hole],
        config: DrillConfig,
        generated_at: Optional[str] = None
    ) -> str:
        """
        Generate a complete drilling program.

        The config is not re-validated; call ``validate_config`` first.

        Args:
            holes: Holes to drill, in any order (not modified)
            config: Drilling configuration shared by all holes
            generated_at: Timestamp for the header (defaults to now)

        Returns:
            Program text

        Raises:
            NoHolesError: If holes is empty or None
        """
        if not holes:
            raise NoHolesError("No holes to drill")

        if generated_at is None:
            generated_at = datetime.now().strftime('%Y-%m-%d %H:%M:%S')

        ordered = optimize_order(holes)
        logger.debug("Generating %s program for %d hole(s)", config.type, len(ordered))

        lines = []
        lines.extend(self._generate_header(holes, config, generated_at))
        lines.extend(self._generate_init(config))
        for position, hole in enumerate(ordered, start=1):
            lines.extend(self._generate_hole_operation(hole, position, config))
        lines.extend(generate_footer(config.return_home))

        return '\n'.join(lines)


def generate_program(
    holes: Sequence[Hole],
    config: DrillConfig,
    settings: Optional[Settings] = None,
    generated_at: Optional[str] = None
) -> str:
    """Generate a drilling program with a one-off generator."""
    return DrillProgramGenerator(settings).generate(holes, config, generated_at)
