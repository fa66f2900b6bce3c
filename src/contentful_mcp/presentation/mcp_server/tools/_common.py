"""
Common utilities for MCP tools.

Shared functions:
- Parameter normalization and validation
- JSON payload formatting
- Error envelope conversion
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Sequence
from typing import Any

from mcp.server.fastmcp.exceptions import ToolError

from contentful_mcp.core.exceptions import ErrorContext, InvalidParameterError

logger = logging.getLogger(__name__)


def normalize_limit(limit: Any) -> int | None:
    """
    Coerce an agent-supplied limit.

    Agents send ints, numeric strings or nothing. Anything that is not a
    positive integer means "no limit".
    """
    if limit is None or isinstance(limit, bool):
        return None
    try:
        value = int(str(limit).strip())
    except ValueError:
        return None
    return value if value > 0 else None


def ensure_choice(name: str, value: str, choices: Sequence[str], tool_name: str) -> str:
    """Return ``value`` normalized to lower case, or raise InvalidParameterError."""
    normalized = value.strip().lower() if isinstance(value, str) else value
    if normalized not in choices:
        raise InvalidParameterError(
            name,
            value,
            f"one of {', '.join(choices)}",
            context=ErrorContext(tool_name=tool_name),
        )
    return normalized


def format_query_payload(query: str, parameters: dict[str, Any], records: Iterable[Any]) -> str:
    """Render a query tool's result envelope."""
    data = [record.to_dict() for record in records]
    return json.dumps(
        {
            "query": query,
            "parameters": parameters,
            "count": len(data),
            "data": data,
        },
        indent=2,
        ensure_ascii=False,
    )


def tool_error(action: str, error: Exception, tool_name: str) -> ToolError:
    """
    Build the error FastMCP reports with ``isError`` set.

    Only errors escaping a tool wrapper get here; resolver failures have
    already degraded to empty results.
    """
    if isinstance(error, InvalidParameterError):
        logger.warning(f"{tool_name}: {error}")
    else:
        logger.exception(f"{tool_name} failed: {error}")
    return ToolError(f"Error {action}: {error}")
