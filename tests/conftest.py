"""
Shared pytest fixtures for the PDAM portal tests.

The backend client is replaced by a ``MagicMock`` built from ``PdamAPI``
so every view can be driven with canned ``ApiResult`` values.
"""

import os
import sys
import time
from unittest.mock import MagicMock

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from pdam_api import ApiResult, PdamAPI
from settings import Settings


def make_result(success=True, message="", data=None, http_status=200, count=None):
    """Build an ApiResult the way PdamAPI.request would."""
    return ApiResult(success=success, message=message, data=data, http_status=http_status, count=count)


@pytest.fixture
def settings():
    return Settings(
        base_url="http://pdam.test",
        app_key="test-app-key",
        secret_key="test-secret",
        token_max_age=60 * 60 * 24,
    )


@pytest.fixture
def api():
    return MagicMock(spec=PdamAPI)


@pytest.fixture
def app(settings, api):
    app = create_app(settings=settings, api=api)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def logged_in_client(client):
    with client.session_transaction() as sess:
        sess["token"] = "tok-123"
        sess["token_stored_at"] = time.time()
    return client


def stored_token(client):
    with client.session_transaction() as sess:
        return sess.get("token")
