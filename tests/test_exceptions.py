"""Tests for the exception hierarchy."""

from __future__ import annotations

from contentful_mcp.core.exceptions import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    ContentStoreError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    InvalidParameterError,
    NetworkError,
    NotFoundError,
    ParseError,
    RateLimitError,
    ServiceUnavailableError,
    ValidationError,
    get_retry_after,
    is_retryable_error,
)


class TestHierarchy:
    def test_api_errors_share_base(self):
        for exc in (
            RateLimitError(),
            AuthenticationError(),
            NotFoundError("space"),
            NetworkError(),
            ServiceUnavailableError(),
        ):
            assert isinstance(exc, APIError)
            assert isinstance(exc, ContentStoreError)

    def test_invalid_parameter_is_validation_error(self):
        exc = InvalidParameterError("status", "soon", "one of ongoing, upcoming, past")
        assert isinstance(exc, ValidationError)
        assert exc.param_name == "status"
        assert exc.category is ErrorCategory.VALIDATION
        assert exc.severity is ErrorSeverity.WARNING
        assert "'soon'" in str(exc)
        assert exc.context.suggestion == "Expected one of ongoing, upcoming, past"

    def test_status_codes(self):
        assert RateLimitError().status_code == 429
        assert AuthenticationError(status_code=403).status_code == 403
        assert NotFoundError("x").status_code == 404
        assert ServiceUnavailableError(status_code=502).status_code == 502

    def test_service_unavailable_message_names_service(self):
        assert str(ServiceUnavailableError("boom")) == "Contentful: boom"

    def test_parse_error_message(self):
        assert str(ParseError("bad json", source="Contentful")) == "Parse error (Contentful): bad json"
        assert str(ParseError("bad json")) == "Parse error: bad json"


class TestRetryClassification:
    def test_retryable(self):
        assert is_retryable_error(RateLimitError())
        assert is_retryable_error(NetworkError())
        assert is_retryable_error(ServiceUnavailableError())

    def test_not_retryable(self):
        assert not is_retryable_error(AuthenticationError())
        assert not is_retryable_error(NotFoundError("x"))
        assert not is_retryable_error(ParseError("x"))
        assert not is_retryable_error(ConfigurationError("x"))
        assert not is_retryable_error(APIError("teapot", status_code=418, retryable=False))

    def test_foreign_exceptions_by_message(self):
        assert is_retryable_error(RuntimeError("connection reset by peer"))
        assert not is_retryable_error(ValueError("bad value"))

    def test_retry_after(self):
        assert get_retry_after(RateLimitError(retry_after=7.0)) == 7.0
        assert get_retry_after(NetworkError()) is None
        assert get_retry_after(ValueError()) is None


class TestToDict:
    def test_rate_limit(self):
        data = RateLimitError(retry_after=2.5, context=ErrorContext(tool_name="query_meetings")).to_dict()
        assert data["retryable"] is True
        assert data["severity"] == "transient"
        assert data["tool"] == "query_meetings"
        assert data["retry_after_seconds"] == 2.5
        assert data["suggestion"] == "Wait and retry the request"

    def test_minimal(self):
        data = ConfigurationError("missing token").to_dict()
        assert data == {
            "error": "missing token",
            "category": "config",
            "severity": "critical",
            "retryable": False,
        }
