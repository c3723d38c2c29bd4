"""Tests for custom error types."""

import pytest

from semscholar.errors import (
    S2APIError,
    S2ConfigError,
    S2DecodeError,
    S2Error,
    S2NotFoundError,
    S2RateLimitError,
)


class TestErrorHierarchy:
    """Test error inheritance and hierarchy."""

    def test_all_errors_inherit_from_base(self):
        assert issubclass(S2APIError, S2Error)
        assert issubclass(S2DecodeError, S2Error)
        assert issubclass(S2ConfigError, S2Error)

    def test_status_errors_inherit_from_api_error(self):
        assert issubclass(S2NotFoundError, S2APIError)
        assert issubclass(S2RateLimitError, S2APIError)

    def test_decode_error_is_not_status_error(self):
        assert not issubclass(S2DecodeError, S2APIError)


class TestErrorMessages:
    def test_api_error_message(self):
        error = S2APIError(502, "unexpected status code 502", "search_papers")
        assert str(error) == "search_papers: unexpected status code 502"
        assert error.status_code == 502
        assert error.body is None

    def test_api_error_without_operation(self):
        assert str(S2APIError(500, "boom")) == "boom"

    def test_not_found_status(self):
        error = S2NotFoundError("unexpected status code 404", "get_author")
        assert error.status_code == 404
        assert error.operation == "get_author"

    def test_rate_limit_retry_after(self):
        error = S2RateLimitError("unexpected status code 429", "get_author", retry_after=30.0)
        assert error.status_code == 429
        assert error.retry_after == 30.0

    def test_decode_error_keeps_cause(self):
        cause = ValueError("bad json")
        error = S2DecodeError("get_release", cause)
        assert error.cause is cause
        assert "get_release" in str(error)
        assert "bad json" in str(error)

    def test_errors_can_be_caught_as_base(self):
        with pytest.raises(S2Error):
            raise S2NotFoundError("unexpected status code 404", "get_dataset")
