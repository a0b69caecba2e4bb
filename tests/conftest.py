"""Pytest configuration and fixtures for Telldus Live tests."""

import json

import pytest
from pathlib import Path
from unittest.mock import MagicMock

from core.client import TelldusClient
from models.types import Credentials


def _make_response(payload=None, status_code=200, reason='OK', body=None):
    """Build a fake requests.Response for the signed client to return."""
    response = MagicMock()
    response.status_code = status_code
    response.reason = reason
    response.text = body if body is not None else json.dumps(payload)
    response.json.side_effect = lambda: json.loads(response.text)
    return response


@pytest.fixture
def make_response():
    """Return a factory for fake HTTP responses."""
    return _make_response


@pytest.fixture
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def credentials():
    """Return a set of dummy OAuth credentials."""
    return Credentials(
        consumer_key='consumer-key',
        consumer_secret='consumer-secret',
        token='access-token',
        token_secret='access-secret',
    )


@pytest.fixture
def auth_file(tmp_path):
    """Write a valid auth.yml to a temporary directory."""
    path = tmp_path / 'auth.yml'
    path.write_text(
        "consumer_key: consumer-key\n"
        "consumer_secret: consumer-secret\n"
        "token: access-token\n"
        "token_secret: access-secret\n"
    )
    return path


@pytest.fixture
def signed_client():
    """Return a mock signed client; set get.return_value/side_effect per test."""
    return MagicMock()


@pytest.fixture
def client(signed_client):
    """Return a TelldusClient backed by the mock signed client."""
    return TelldusClient(signed_client)
