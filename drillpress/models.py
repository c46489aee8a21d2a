"""Shared dataclasses for drill toolpath generation."""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class DrillType(str, Enum):
    """Drilling strategy applied to every hole in a run."""
    THROUGH = 'through'
    BLIND = 'blind'
    POCKET = 'pocket'
    COUNTERBORE = 'counterbore'

    @classmethod
    def coerce(cls, value) -> Optional['DrillType']:
        """Return the matching member, or None for unrecognized values."""
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class Hole:
    """A single drilling location."""
    x: float
    y: float
    diameter: Optional[float] = None
    depth: Optional[float] = None
    number: int = 0  # display only, 1-based

    def to_dict(self) -> Dict[str, Any]:
        return {
            'x': self.x,
            'y': self.y,
            'diameter': self.diameter,
            'depth': self.depth,
            'number': self.number,
        }


# Browser payloads use camelCase; map them onto DrillConfig fields.
_CONFIG_KEY_ALIASES = {
    'cbDiameter': 'cb_diameter',
    'cbDepth': 'cb_depth',
    'safeZ': 'safe_z',
    'feedRate': 'feed_rate',
    'plungeRate': 'plunge_rate',
    'materialThickness': 'material_thickness',
    'returnHome': 'return_home',
}


@dataclass
class DrillConfig:
    """Operation parameters shared by all holes in one generation run."""
    type: str = DrillType.THROUGH.value
    diameter: Optional[float] = None
    depth: Optional[float] = None

    # Counterbore only
    cb_diameter: Optional[float] = None
    cb_depth: Optional[float] = None

    # Fall back to Settings when None
    safe_z: Optional[float] = None
    feed_rate: Optional[float] = None
    plunge_rate: Optional[float] = None

    material_thickness: Optional[float] = None
    return_home: bool = True

    def __post_init__(self):
        if isinstance(self.type, DrillType):
            self.type = self.type.value

    @property
    def drill_type(self) -> Optional[DrillType]:
        return DrillType.coerce(self.type)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DrillConfig':
        """Build a config from a dict with snake_case or camelCase keys."""
        fields = {}
        for key, value in data.items():
            name = _CONFIG_KEY_ALIASES.get(key, key)
            if name in cls.__dataclass_fields__:
                fields[name] = value
        return cls(**fields)


@dataclass(frozen=True)
class Settings:
    """Process-wide defaults supplied by the host (read-only to the engine)."""
    safe_z: float = 0.5               # work units
    feed_rate: float = 2.0            # work units / second
    plunge_rate: float = 0.5          # work units / second
    spindle_startup_time: float = 3   # seconds
    units: str = 'in'
    app_name: str = 'Drill Press'
    app_version: str = '1.0.0'


@dataclass
class MachineEnvelope:
    """Axis travel limits of the machine."""
    x_min: float = 0.0
    x_max: float = 96.0
    y_min: float = 0.0
    y_max: float = 48.0
    z_min: float = -6.0
    z_max: float = 6.0

    def contains(self, x: float, y: float, z: float = 0.0) -> bool:
        return (
            self.x_min <= x <= self.x_max
            and self.y_min <= y <= self.y_max
            and self.z_min <= z <= self.z_max
        )
