"""
Core module for Contentful MCP.

Provides:
- Unified exception hierarchy
- Async fan-out helpers
"""

from .async_utils import gather_named, gather_with_errors
from .exceptions import (
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

__all__ = [
    # Exceptions
    "ContentStoreError",
    "ErrorContext",
    "ErrorSeverity",
    "ErrorCategory",
    "APIError",
    "RateLimitError",
    "AuthenticationError",
    "NotFoundError",
    "NetworkError",
    "ServiceUnavailableError",
    "ValidationError",
    "InvalidParameterError",
    "ParseError",
    "ConfigurationError",
    "is_retryable_error",
    "get_retry_after",
    # Async utilities
    "gather_with_errors",
    "gather_named",
]
