"""
Shared fixtures for Discourse API client tests.
"""

import json
from typing import Any, Optional
from unittest.mock import MagicMock

import pytest

from discourse_api import DiscourseAPIClient


def _make_response(
    payload: Any = None,
    status_code: int = 200,
    text: Optional[str] = None
) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    if text is None:
        text = json.dumps(payload) if payload is not None else ""
    response.text = text
    return response


@pytest.fixture
def make_response():
    """Factory for fake requests.Response objects."""
    return _make_response


@pytest.fixture
def session():
    """Mock requests.Session replacing the client's real one."""
    return MagicMock()


@pytest.fixture
def client(session):
    """API client wired to the mock session."""
    api = DiscourseAPIClient("forum.example.com", "test-key", "system")
    api._http._session = session
    return api
