"""
Pytest configuration and fixtures for http-adapter tests.
"""

from unittest.mock import patch

import pytest
import requests
import responses as responses_lib

from tests.helpers import make_response


@pytest.fixture
def ok_body():
    return {"data": None, "error": None}


@pytest.fixture
def session_request(ok_body):
    """
    Patch requests.Session.request for every thread-local session.

    The mock records exactly what the adapter hands to requests.
    """
    with patch.object(requests.Session, "request") as mock_request:
        mock_request.return_value = make_response(200, ok_body)
        yield mock_request


@pytest.fixture
def mock_responses():
    """Mock HTTP responses using responses library."""
    with responses_lib.RequestsMock() as rsps:
        yield rsps
