from unittest.mock import Mock, patch

import pytest
import requests

from backend.app import create_app


def make_response(status_code=200, body=None, text=''):
    """Build a stand-in for requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.text = text
    if isinstance(body, Exception):
        response.json.side_effect = body
    else:
        response.json.return_value = body if body is not None else {}
    return response


@pytest.fixture
def api_keys(monkeypatch):
    monkeypatch.setenv('AVIATIONSTACK_API_KEY', 'test-aviationstack-key')
    monkeypatch.setenv('FLIGHTAPI_KEY', 'test-flightapi-key')
    monkeypatch.delenv('AVIATIONSTACK_BASE_URL', raising=False)
    monkeypatch.delenv('FLIGHTAPI_BASE_URL', raising=False)
    monkeypatch.delenv('BOOKING_BASE_URL', raising=False)


@pytest.fixture
def no_api_keys(monkeypatch):
    monkeypatch.delenv('AVIATIONSTACK_API_KEY', raising=False)
    monkeypatch.delenv('FLIGHTAPI_KEY', raising=False)


@pytest.fixture
def app():
    app = create_app()
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def upstream():
    """Patch every outbound provider call; set return_value/side_effect per test."""
    with patch.object(requests.Session, 'get') as mock_get:
        mock_get.return_value = make_response(body={'data': []})
        yield mock_get
