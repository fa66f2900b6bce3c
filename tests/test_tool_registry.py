"""Tests for the tool registry."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from contentful_mcp.presentation.mcp_server.tool_registry import (
    TOOL_CATEGORIES,
    check_tool_registration,
    list_registered_tools,
    validate_tool_registry,
)


def _mcp_with_tools(names):
    mcp = MagicMock()
    mcp._tool_manager._tools = {name: object() for name in names}
    return mcp


ALL_TOOLS = [tool for info in TOOL_CATEGORIES.values() for tool in info["tools"]]


class TestLookups:
    def test_list_registered_tools(self):
        tools = list_registered_tools()
        assert tools["search"] == ["search_content"]
        assert len(tools["content"]) == 6

    def test_tool_names_unique(self):
        assert len(ALL_TOOLS) == len(set(ALL_TOOLS))


class TestValidation:
    def test_in_sync(self):
        result = validate_tool_registry(_mcp_with_tools(ALL_TOOLS))
        assert result["valid"]
        assert result["missing"] == []

    def test_missing_and_extra(self):
        result = validate_tool_registry(_mcp_with_tools([*ALL_TOOLS[1:], "rogue_tool"]))
        assert not result["valid"]
        assert result["missing"] == [ALL_TOOLS[0]]
        assert result["extra"] == ["rogue_tool"]

    def test_unreadable_registry(self):
        mcp = MagicMock(spec=[])
        result = validate_tool_registry(mcp)
        assert not result["valid"]
        assert "error" in result

    def test_check_raises_on_request(self):
        mcp = _mcp_with_tools([])
        assert check_tool_registration(mcp) is False
        with pytest.raises(RuntimeError, match="Tool registry validation failed"):
            check_tool_registration(mcp, raise_on_error=True)
