"""
Async Utilities for concurrent store fetches.

Provides:
- Fan-out execution that waits for every coroutine to settle
- Named fan-out returning results keyed by label
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Mapping
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def gather_with_errors(
    *coros: Awaitable[T],
    return_exceptions: bool = False,
) -> list[T | BaseException]:
    """
    Execute coroutines concurrently.

    Results keep the order of ``coros``. With ``return_exceptions=True``
    a failing coroutine contributes its exception instead of cancelling
    the others, so every fetch settles before the caller composes a
    response.

    Example:
        results = await gather_with_errors(
            resolver_a.list_all(),
            resolver_b.list_all(),
            return_exceptions=True,
        )
    """
    return list(await asyncio.gather(*coros, return_exceptions=return_exceptions))


async def gather_named(
    coros: Mapping[str, Awaitable[Any]],
) -> dict[str, Any]:
    """
    Settle a mapping of label → coroutine concurrently.

    Each value in the result is either the coroutine's return value or
    the exception it raised.
    """
    labels = list(coros)
    results = await gather_with_errors(*(coros[label] for label in labels), return_exceptions=True)
    for label, result in zip(labels, results):
        if isinstance(result, BaseException):
            logger.debug(f"Concurrent fetch '{label}' raised {type(result).__name__}: {result}")
    return dict(zip(labels, results))
