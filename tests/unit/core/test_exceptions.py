"""Tests for the adapter error hierarchy."""

import pytest

from http_adapter.core.exceptions import (
    ConfigurationError,
    HttpAdapterError,
    HttpGenericError,
    HttpRequestError,
    HttpStatusCodeError,
    HttpTimeoutError,
    ParseError,
    RequestDescription,
)


PREDICATES = {
    400: "is_bad_request",
    401: "is_unauthorized",
    403: "is_forbidden",
    404: "is_not_found",
    429: "is_too_many_requests",
    500: "is_server_error",
    502: "is_bad_gateway",
    503: "is_service_unavailable",
    504: "is_gateway_timeout",
}


class TestHierarchy:
    """All adapter errors share one base."""

    @pytest.mark.parametrize("error", [
        ConfigurationError("bad"),
        HttpStatusCodeError("Response code 500 (Internal Server Error)", 500),
        ParseError("Unexpected token", "<html>"),
        HttpTimeoutError("Timeout of 5000ms exceeded"),
        HttpRequestError("refused", RequestDescription("GET", "http://example.com")),
        HttpGenericError("boom", RuntimeError("boom")),
    ])
    def test_base_class(self, error):
        assert isinstance(error, HttpAdapterError)
        assert str(error) == error.message


class TestHttpStatusCodeError:
    """Test status predicates."""

    @pytest.mark.parametrize("status_code", sorted(PREDICATES))
    def test_exactly_one_predicate(self, status_code):
        error = HttpStatusCodeError("failed", status_code)

        truthy = [name for name in PREDICATES.values() if getattr(error, name)()]

        assert truthy == [PREDICATES[status_code]]
        assert error.get_status_code() == status_code

    @pytest.mark.parametrize("status_code", [200, 304, 418, 501])
    def test_other_codes_match_nothing(self, status_code):
        error = HttpStatusCodeError("failed", status_code)
        assert not any(getattr(error, name)() for name in PREDICATES.values())

    def test_defaults(self):
        error = HttpStatusCodeError("failed", 400)
        assert error.body is None
        assert error.headers == {}

    def test_body_and_headers(self):
        error = HttpStatusCodeError("failed", 429, body={"retry": True}, headers={"retry-after": "5"})
        assert error.body == {"retry": True}
        assert error.headers == {"retry-after": "5"}


class TestOtherErrors:

    def test_timeout_message(self):
        assert HttpTimeoutError.for_timeout(5000).message == "Timeout of 5000ms exceeded"
        assert HttpTimeoutError.for_timeout(60000).message == "Timeout of 60000ms exceeded"

    def test_parse_error_keeps_body(self):
        error = ParseError("Unexpected token <", "<html>")
        assert error.response_body == "<html>"

    def test_generic_keeps_original(self):
        original = OSError("socket closed")
        assert HttpGenericError("socket closed", original).original_error is original


class TestRequestDescription:
    """Test request description used by HttpRequestError."""

    def test_without_body(self):
        request = RequestDescription("GET", "http://example.com?a=1", {"X": "1"})

        assert not request.has_body
        assert request.as_dict() == {"method": "GET", "url": "http://example.com?a=1", "headers": {"X": "1"}}

    def test_with_body(self):
        request = RequestDescription("POST", "http://example.com", body={})

        assert request.has_body
        assert request.as_dict() == {"method": "POST", "url": "http://example.com", "headers": {}, "body": {}}

    def test_none_body_is_still_a_body(self):
        assert RequestDescription("PUT", "http://example.com", body=None).has_body

    def test_immutable(self):
        request = RequestDescription("GET", "http://example.com")
        with pytest.raises(AttributeError):
            request.url = "http://other.example.com"
