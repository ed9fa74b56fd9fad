"""Shared fixtures for the GitHub tool tests."""

import json
import os
from unittest.mock import MagicMock, patch

import pytest

from toolsette_github import BearerAuth


def fake_response(status_code=200, json_data=None, text=None):
    """Build a stand-in for ``requests.Response``."""
    response = MagicMock()
    response.status_code = status_code
    if json_data is not None:
        body = json.dumps(json_data)
        response.headers = {"Content-Type": "application/json; charset=utf-8"}
        response.json.return_value = json_data
    else:
        body = text or ""
        response.headers = {"Content-Type": "text/plain"}
        response.json.side_effect = ValueError("No JSON object could be decoded")
    response.text = body
    response.content = body.encode()
    return response


@pytest.fixture
def mock_request():
    """Patch the outbound HTTP call; defaults to a 200 with an empty JSON object."""
    with patch("toolsette_github.client.requests.request") as request:
        request.return_value = fake_response(200, {})
        yield request


@pytest.fixture
def sent_request():
    """Patch the transport below ``requests`` so tests see the prepared request."""
    with patch("requests.sessions.Session.send") as send:
        send.return_value = fake_response(200, {})
        yield send


@pytest.fixture
def auth():
    return BearerAuth(api_key="test_token_123")


@pytest.fixture
def mock_env_token():
    """Mock the GITHUB_TOKEN environment variable."""
    with patch.dict(os.environ, {"GITHUB_TOKEN": "test_token_123"}):
        yield


@pytest.fixture
def no_env_token():
    with patch.dict(os.environ, {}, clear=True):
        yield
