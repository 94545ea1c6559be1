from __future__ import annotations

import pytest

from stylegate.config import StyleGateConfig
from stylegate.web.app import create_app


@pytest.fixture
def config():
    """A small CSS size limit so oversized-input paths are cheap to hit."""
    return StyleGateConfig(max_css_bytes=2000)


@pytest.fixture
def app(config):
    """Create a Flask app for testing."""
    application = create_app(config)
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()
