"""
Pytest configuration and shared fixtures for the Iterable API client tests.

Provides a Request wrapper with its session transport mocked out, a factory
for canned ``requests.Response`` objects and a mock wrapper for endpoint tests.
"""

import json
from typing import Any, Optional
from unittest.mock import Mock

import pytest
import requests

from iterable_api.api.client import Request
from iterable_api.core.logging_manager import LoggingManager
from tests.fixtures.sample_data import TEST_API_KEY, BASE_URL


ITERABLE_ENV_VARS = (
    "ITERABLE_API_KEY",
    "ITERABLE_BASE_URL",
    "ITERABLE_KEEP_ALIVE",
    "ITERABLE_POOL_CONNECTIONS",
    "ITERABLE_POOL_MAXSIZE",
)


def build_response(status_code: int = 200, body: Any = None,
                   content_type: Optional[str] = "application/json") -> requests.Response:
    """Build a real ``requests.Response`` without touching the network"""
    response = requests.Response()
    response.status_code = status_code
    response.url = f"{BASE_URL}/test"
    response.encoding = "utf-8"

    if body is None:
        response._content = b""
    else:
        if isinstance(body, (dict, list)):
            response._content = json.dumps(body).encode("utf-8")
        else:
            response._content = str(body).encode("utf-8")
        if content_type:
            response.headers["Content-Type"] = content_type

    return response


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep real ITERABLE_* variables from leaking into tests"""
    for name in ITERABLE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def api_key():
    return TEST_API_KEY


@pytest.fixture
def make_response():
    """Factory fixture for canned responses"""
    return build_response


@pytest.fixture
def request_wrapper(api_key):
    """Request wrapper whose session transport is a Mock"""
    wrapper = Request(api_key)
    wrapper.session.request = Mock(return_value=build_response(200, {"lists": []}))
    yield wrapper
    wrapper.close()


@pytest.fixture
def mock_request():
    """Mock wrapper for endpoint tests"""
    return Mock(spec=Request)


@pytest.fixture
def logging_manager():
    """LoggingManager that is reset after each test"""
    manager = LoggingManager()
    yield manager
    manager.reset()
