"""
Unified Exception Hierarchy for Contentful MCP.

Exception Hierarchy:
    ContentStoreError (base)
    ├── APIError
    │   ├── RateLimitError
    │   ├── AuthenticationError
    │   ├── NotFoundError
    │   ├── NetworkError
    │   └── ServiceUnavailableError
    ├── ValidationError
    │   └── InvalidParameterError
    ├── ParseError
    └── ConfigurationError

The Contentful client raises these. Query resolvers catch them at their
boundary and degrade to empty results; only the tool wrappers and the
statistics resource turn an escaping error into a user-visible message.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Any


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    WARNING = auto()  # Recoverable, can continue
    ERROR = auto()  # Failed but can retry
    CRITICAL = auto()  # Cannot continue
    TRANSIENT = auto()  # Temporary, should retry automatically


class ErrorCategory(Enum):
    """Categories for error classification."""

    API = "api"
    VALIDATION = "validation"
    DATA = "data"
    CONFIGURATION = "config"
    NETWORK = "network"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Rich context for error messages."""

    tool_name: str | None = None
    operation: str | None = None
    input_value: Any = None
    suggestion: str | None = None
    retry_after: float | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


class ContentStoreError(Exception):
    """
    Base exception for all Contentful MCP errors.

    Provides:
    - Structured error context
    - Severity classification
    - Retry guidance
    """

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        category: ErrorCategory = ErrorCategory.API,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.context = context or ErrorContext()
        self.severity = severity
        self.category = category
        self.retryable = retryable

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {
            "error": str(self),
            "category": self.category.value,
            "severity": self.severity.name.lower(),
            "retryable": self.retryable,
        }
        if self.context.tool_name:
            result["tool"] = self.context.tool_name
        if self.context.suggestion:
            result["suggestion"] = self.context.suggestion
        if self.context.retry_after:
            result["retry_after_seconds"] = self.context.retry_after
        return result


# =============================================================================
# API Errors
# =============================================================================


class APIError(ContentStoreError):
    """Base class for errors returned by the Contentful API."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        context: ErrorContext | None = None,
        retryable: bool = True,
        category: ErrorCategory = ErrorCategory.API,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.ERROR,
            category=category,
            retryable=retryable,
        )
        self.status_code = status_code


class RateLimitError(APIError):
    """Raised when the API answers 429."""

    def __init__(
        self,
        message: str = "API rate limit exceeded",
        *,
        retry_after: float = 1.0,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = replace(
            context or ErrorContext(),
            retry_after=retry_after,
            suggestion=(context.suggestion if context else None) or "Wait and retry the request",
        )
        super().__init__(message, status_code=429, context=ctx, retryable=True)
        self.severity = ErrorSeverity.TRANSIENT


class AuthenticationError(APIError):
    """Raised for 401/403 answers (bad space id or access token)."""

    def __init__(
        self,
        message: str = "Access token rejected",
        *,
        status_code: int = 401,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code, context=context, retryable=False)
        self.severity = ErrorSeverity.CRITICAL


class NotFoundError(APIError):
    """Raised when the space, environment or endpoint does not exist."""

    def __init__(
        self,
        resource: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            f"{resource} not found",
            status_code=404,
            context=context,
            retryable=False,
            category=ErrorCategory.DATA,
        )


class NetworkError(APIError):
    """Raised for network connectivity issues."""

    def __init__(
        self,
        message: str = "Network connection failed",
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(message, context=context, retryable=True, category=ErrorCategory.NETWORK)


class ServiceUnavailableError(APIError):
    """Raised when the external service answers with a 5xx."""

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        *,
        service: str = "Contentful",
        status_code: int = 503,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(f"{service}: {message}", status_code=status_code, context=context, retryable=True)
        self.severity = ErrorSeverity.TRANSIENT


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(ContentStoreError):
    """Base class for validation errors."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.WARNING,
            category=ErrorCategory.VALIDATION,
            retryable=False,
        )


class InvalidParameterError(ValidationError):
    """Raised when a parameter value is invalid."""

    def __init__(
        self,
        param_name: str,
        value: Any,
        expected: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = replace(context or ErrorContext(), input_value=value, suggestion=f"Expected {expected}")
        super().__init__(
            f"Invalid parameter '{param_name}': {value!r} (expected {expected})",
            context=ctx,
        )
        self.param_name = param_name


# =============================================================================
# Data / Configuration Errors
# =============================================================================


class ParseError(ContentStoreError):
    """Raised when a response body cannot be decoded."""

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        full_msg = f"Parse error ({source}): {message}" if source else f"Parse error: {message}"
        super().__init__(
            full_msg,
            context=context,
            severity=ErrorSeverity.ERROR,
            category=ErrorCategory.DATA,
            retryable=False,
        )


class ConfigurationError(ContentStoreError):
    """Raised for configuration-related errors."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.CRITICAL,
            category=ErrorCategory.CONFIGURATION,
            retryable=False,
        )


def is_retryable_error(error: BaseException) -> bool:
    """Check if an error should be retried."""
    if isinstance(error, ContentStoreError):
        return error.retryable

    error_str = str(error).lower()
    transient_patterns = [
        "rate limit",
        "too many requests",
        "temporarily unavailable",
        "service unavailable",
        "connection reset",
        "timeout",
    ]
    return any(pattern in error_str for pattern in transient_patterns)


def get_retry_after(error: BaseException) -> float | None:
    """Server-suggested delay carried by the error, if any."""
    if isinstance(error, ContentStoreError):
        return error.context.retry_after
    return None
