"""Tests for routetree.errors — exception hierarchy and error messages."""

import pytest

from routetree.errors import (
    ConfigurationError,
    HTTPError,
    NoReverseMatch,
    NotFound,
    RouteTreeError,
)
from routetree.routing.route import ReverseFailure


class TestHierarchy:
    def test_http_error_is_routetree_error(self) -> None:
        assert issubclass(HTTPError, RouteTreeError)

    def test_not_found_is_http_error(self) -> None:
        assert issubclass(NotFound, HTTPError)

    def test_configuration_error_is_routetree_error(self) -> None:
        assert issubclass(ConfigurationError, RouteTreeError)

    def test_no_reverse_match_is_routetree_error(self) -> None:
        assert issubclass(NoReverseMatch, RouteTreeError)


class TestHTTPError:
    def test_status_and_detail(self) -> None:
        err = HTTPError(status=400, detail="Bad request")
        assert err.status == 400
        assert err.detail == "Bad request"

    def test_str_with_detail(self) -> None:
        assert str(HTTPError(status=400, detail="Bad request")) == "400: Bad request"

    def test_str_without_detail(self) -> None:
        assert str(HTTPError(status=500)) == "500"

    def test_frozen(self) -> None:
        err = HTTPError(status=400)
        with pytest.raises(AttributeError):
            err.status = 500  # type: ignore[misc]


class TestNotFound:
    def test_defaults(self) -> None:
        err = NotFound()
        assert err.status == 404
        assert err.detail == "Not Found"

    def test_custom_detail(self) -> None:
        assert str(NotFound("No route matches '/x'")) == "404: No route matches '/x'"


class TestNoReverseMatch:
    def test_carries_failure(self) -> None:
        failure = ReverseFailure("post-detail", "missing parameter 'id'")
        err = NoReverseMatch(failure)
        assert err.failure is failure
        assert str(err) == "Reverse for 'post-detail' failed: missing parameter 'id'"
