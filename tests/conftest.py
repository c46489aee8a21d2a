"""Test configuration and fixtures."""
import pytest

from app import create_app
from drillpress.models import DrillConfig, Hole, Settings


class TestConfig:
    """Test configuration."""
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    APP_NAME = 'Drill Press'
    APP_VERSION = '1.0.0'
    DRILL_SAFE_Z = 0.5
    DRILL_FEED_RATE = 2.0
    DRILL_PLUNGE_RATE = 0.5
    DRILL_SPINDLE_STARTUP_TIME = 3
    DRILL_UNITS = 'in'
    MACHINE_X_MIN = 0
    MACHINE_X_MAX = 24
    MACHINE_Y_MIN = 0
    MACHINE_Y_MAX = 18
    MACHINE_Z_MIN = -4
    MACHINE_Z_MAX = 4
    CORS_ORIGINS = '*'


@pytest.fixture
def app():
    """Create and configure a test application instance."""
    app = create_app(TestConfig)

    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    """Create a test client."""
    return app.test_client()


@pytest.fixture
def settings():
    """Default host settings."""
    return Settings()


@pytest.fixture
def through_config():
    """Plain through-hole configuration."""
    return DrillConfig(type='through', diameter=0.25, depth=0.75)


@pytest.fixture
def pocket_config():
    """Helical pocket configuration."""
    return DrillConfig(type='pocket', diameter=0.5, depth=1.0)


@pytest.fixture
def counterbore_config():
    """Counterbore configuration."""
    return DrillConfig(
        type='counterbore',
        diameter=0.25,
        depth=0.75,
        cb_diameter=0.5,
        cb_depth=0.25
    )


@pytest.fixture
def sample_holes():
    """Three holes deliberately out of travel order."""
    return [
        Hole(x=5.0, y=5.0, number=1),
        Hole(x=1.0, y=1.0, number=2),
        Hole(x=4.0, y=5.0, number=3),
    ]


@pytest.fixture
def job_payload():
    """JSON job body for API tests."""
    return {
        'config': {
            'type': 'through',
            'diameter': 0.25,
            'depth': 0.5
        },
        'holes': [
            {'x': 3.0, 'y': 3.0},
            {'x': 1.0, 'y': 1.0},
            {'x': 2.0, 'y': 2.0}
        ]
    }
