"""
Base API Client - Common HTTP request pattern with retry and error mapping.

Provides a reusable base class with:
- A shared httpx.AsyncClient with bounded connection pool
- Retry of transient failures (429, 5xx, transport errors) via tenacity
- Retry-After / X-Contentful-RateLimit-Reset support
- HTTP status → exception mapping (see core.exceptions)

Unlike a fail-soft client, every failure is raised. Callers decide how to
degrade; the query resolvers turn failures into empty results.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from tenacity import AsyncRetrying, RetryCallState, retry_if_exception, stop_after_attempt
from typing_extensions import Self

from contentful_mcp.core.exceptions import (
    APIError,
    AuthenticationError,
    NetworkError,
    NotFoundError,
    ParseError,
    RateLimitError,
    ServiceUnavailableError,
    get_retry_after,
    is_retryable_error,
)

logger = logging.getLogger(__name__)

# Upper bound for a single backoff sleep (seconds)
MAX_RETRY_WAIT = 30.0


class BaseAPIClient:
    """
    Base class for external API clients.

    Subclasses set ``_service_name`` and call ``_make_request()``.

    Example:
        class MyClient(BaseAPIClient):
            _service_name = "MyAPI"

            def __init__(self):
                super().__init__(base_url="https://api.example.com")

            async def get_item(self, item_id: str) -> dict:
                return await self._make_request(f"/items/{item_id}")
    """

    _service_name: str = "API"

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        max_attempts: int = 3,
        retry_wait: float = 1.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize base client.

        Args:
            base_url: Base URL for the API (paths are appended to it)
            timeout: Request timeout in seconds
            headers: Default headers for all requests
            max_attempts: Total attempts for a retryable failure
            retry_wait: Base of the exponential backoff in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._max_attempts = max(1, max_attempts)
        self._retry_wait = retry_wait
        self._client = httpx.AsyncClient(
            timeout=self._timeout,
            headers=headers or {},
            limits=httpx.Limits(
                max_connections=20,
                max_keepalive_connections=10,
                keepalive_expiry=30.0,
            ),
            transport=transport,
        )

    def _build_url(self, url: str) -> str:
        """Build full URL from path or full URL."""
        if url.startswith(("http://", "https://")):
            return url
        return f"{self._base_url}{url}"

    async def _make_request(self, url: str, *, params: dict[str, Any] | None = None) -> Any:
        """
        GET ``url`` and return the decoded JSON body.

        Retryable failures are retried up to ``max_attempts`` times; the last
        error is re-raised. Non-retryable failures raise immediately.
        """
        full_url = self._build_url(url)
        result: Any = None
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._max_attempts),
            wait=self._compute_wait,
            retry=retry_if_exception(is_retryable_error),
            before_sleep=self._log_retry,
            reraise=True,
        ):
            with attempt:
                result = await self._request_once(full_url, params)
        return result

    async def _request_once(self, url: str, params: dict[str, Any] | None) -> Any:
        try:
            response = await self._client.get(url, params=params)
        except httpx.TimeoutException as e:
            raise NetworkError(f"{self._service_name} request timed out: {e}") from e
        except httpx.RequestError as e:
            raise NetworkError(f"{self._service_name} request failed: {e}") from e

        self._raise_for_status(response)
        return self._parse_response(response)

    def _raise_for_status(self, response: httpx.Response) -> None:
        """Map error status codes to the exception hierarchy."""
        status = response.status_code
        if status < 400:
            return

        message = self._error_message(response)
        if status == 429:
            raise RateLimitError(
                f"{self._service_name}: rate limited",
                retry_after=self._get_retry_after(response),
            )
        if status in (401, 403):
            raise AuthenticationError(f"{self._service_name}: {message}", status_code=status)
        if status == 404:
            raise NotFoundError(f"{self._service_name} resource {response.request.url.path}")
        if status >= 500:
            raise ServiceUnavailableError(message, service=self._service_name, status_code=status)
        raise APIError(f"{self._service_name} HTTP {status}: {message}", status_code=status, retryable=False)

    def _parse_response(self, response: httpx.Response) -> Any:
        """Parse response body. Override for custom extraction logic."""
        try:
            return response.json()
        except ValueError as e:
            raise ParseError(str(e), source=self._service_name) from e

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.reason_phrase or f"HTTP {response.status_code}"
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return response.reason_phrase or f"HTTP {response.status_code}"

    @staticmethod
    def _get_retry_after(response: httpx.Response) -> float:
        """Extract the server-suggested delay, defaulting to one second."""
        for header in ("Retry-After", "X-Contentful-RateLimit-Reset"):
            value = response.headers.get(header)
            if value is None:
                continue
            try:
                return float(value)
            except ValueError:
                continue
        return 1.0

    def _compute_wait(self, retry_state: RetryCallState) -> float:
        """Exponential backoff, never shorter than a server-supplied hint."""
        backoff = self._retry_wait * (2 ** (retry_state.attempt_number - 1))
        error = retry_state.outcome.exception() if retry_state.outcome else None
        hint = get_retry_after(error) if error is not None and self._retry_wait > 0 else None
        return min(max(backoff, hint or 0.0), MAX_RETRY_WAIT)

    def _log_retry(self, retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        logger.warning(
            f"{self._service_name} request error (attempt {retry_state.attempt_number}/"
            f"{self._max_attempts}): {error}"
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
