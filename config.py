import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Flask application configuration."""

    # Flask core
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-key-change-in-production')

    # App identity (printed in program headers)
    APP_NAME = os.environ.get('APP_NAME', 'Drill Press')
    APP_VERSION = os.environ.get('APP_VERSION', '1.0.0')

    # Drilling defaults, used where a request leaves a value out
    DRILL_SAFE_Z = float(os.environ.get('DRILL_SAFE_Z', 0.5))
    DRILL_FEED_RATE = float(os.environ.get('DRILL_FEED_RATE', 2.0))  # units/sec
    DRILL_PLUNGE_RATE = float(os.environ.get('DRILL_PLUNGE_RATE', 0.5))  # units/sec
    DRILL_SPINDLE_STARTUP_TIME = float(os.environ.get('DRILL_SPINDLE_STARTUP_TIME', 3))  # seconds
    DRILL_UNITS = os.environ.get('DRILL_UNITS', 'in')

    # Machine envelope for bounds checking
    MACHINE_X_MIN = float(os.environ.get('MACHINE_X_MIN', 0))
    MACHINE_X_MAX = float(os.environ.get('MACHINE_X_MAX', 96))
    MACHINE_Y_MIN = float(os.environ.get('MACHINE_Y_MIN', 0))
    MACHINE_Y_MAX = float(os.environ.get('MACHINE_Y_MAX', 48))
    MACHINE_Z_MIN = float(os.environ.get('MACHINE_Z_MIN', -6))
    MACHINE_Z_MAX = float(os.environ.get('MACHINE_Z_MAX', 6))

    # The FabMo dashboard serves apps from its own origin
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
