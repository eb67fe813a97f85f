from __future__ import annotations

import pytest

from cssgradient.config import GradientConfig
from cssgradient.web.app import create_app


@pytest.fixture
def app():
    """Create a Flask app for testing."""
    application = create_app(GradientConfig(width=200.0, height=100.0))
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()
