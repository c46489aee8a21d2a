"""Settings management service."""
from typing import Dict, Mapping

from flask import current_app

from drillpress.models import MachineEnvelope, Settings


def build_settings(config: Mapping) -> Settings:
    """Build drilling defaults from a Flask-style config mapping."""
    return Settings(
        safe_z=float(config.get('DRILL_SAFE_Z', 0.5)),
        feed_rate=float(config.get('DRILL_FEED_RATE', 2.0)),
        plunge_rate=float(config.get('DRILL_PLUNGE_RATE', 0.5)),
        spindle_startup_time=float(config.get('DRILL_SPINDLE_STARTUP_TIME', 3)),
        units=config.get('DRILL_UNITS', 'in'),
        app_name=config.get('APP_NAME', 'Drill Press'),
        app_version=config.get('APP_VERSION', '1.0.0')
    )


def build_machine_envelope(config: Mapping) -> MachineEnvelope:
    """Build machine travel limits from a Flask-style config mapping."""
    return MachineEnvelope(
        x_min=float(config.get('MACHINE_X_MIN', 0)),
        x_max=float(config.get('MACHINE_X_MAX', 96)),
        y_min=float(config.get('MACHINE_Y_MIN', 0)),
        y_max=float(config.get('MACHINE_Y_MAX', 48)),
        z_min=float(config.get('MACHINE_Z_MIN', -6)),
        z_max=float(config.get('MACHINE_Z_MAX', 6))
    )


class SettingsService:
    """Read-only access to host defaults held in the Flask config."""

    @staticmethod
    def get_settings() -> Settings:
        """Build drilling defaults from the application config."""
        return build_settings(current_app.config)

    @staticmethod
    def get_machine_envelope() -> MachineEnvelope:
        """Build machine travel limits from the application config."""
        return build_machine_envelope(current_app.config)

    @staticmethod
    def get_settings_dict() -> Dict:
        """Get defaults and machine envelope as dict for JSON."""
        settings = SettingsService.get_settings()
        envelope = SettingsService.get_machine_envelope()
        return {
            'safe_z': settings.safe_z,
            'feed_rate': settings.feed_rate,
            'plunge_rate': settings.plunge_rate,
            'spindle_startup_time': settings.spindle_startup_time,
            'units': settings.units,
            'app_name': settings.app_name,
            'app_version': settings.app_version,
            'envelope': {
                'x_min': envelope.x_min,
                'x_max': envelope.x_max,
                'y_min': envelope.y_min,
                'y_max': envelope.y_max,
                'z_min': envelope.z_min,
                'z_max': envelope.z_max
            }
        }
