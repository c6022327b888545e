"""Tests for the FastMCP-backed stdio server registration."""

from unittest.mock import patch

import pytest
from mcp.server.fastmcp.exceptions import ToolError

from lightbulb_core.activity_log import ActivityLogError, FileActivityLog
from lightbulb_core.service import LightbulbService
from lightbulb_core.stdio_server import build_stdio_server


@pytest.fixture
def server_and_service():
    service = LightbulbService.in_memory()
    return build_stdio_server(service), service


@pytest.mark.asyncio
async def test_tools_are_registered(server_and_service):
    server, _ = server_and_service
    tools = await server.list_tools()
    assert sorted(t.name for t in tools) == [
        "get_lightbulb_status",
        "turn_off_lightbulb",
        "turn_on_lightbulb",
    ]
    descriptions = {t.name: t.description for t in tools}
    assert descriptions["turn_on_lightbulb"] == "Turn on the lightbulb"


@pytest.mark.asyncio
async def test_resources_are_registered(server_and_service):
    server, _ = server_and_service
    resources = await server.list_resources()
    assert sorted(str(r.uri).rstrip("/") for r in resources) == ["lightbulb://log", "lightbulb://summary"]


@pytest.mark.asyncio
async def test_turn_on_changes_state(server_and_service):
    server, service = server_and_service
    await server.call_tool("turn_on_lightbulb", {})
    assert service.get_lightbulb_status() == "The lightbulb is on"
    assert len(service.activity_log.entries) == 1


@pytest.mark.asyncio
async def test_already_on_is_a_tool_error(server_and_service):
    server, service = server_and_service
    await server.call_tool("turn_on_lightbulb", {})
    with pytest.raises(ToolError, match="already on"):
        await server.call_tool("turn_on_lightbulb", {})
    assert len(service.activity_log.entries) == 1


@pytest.mark.asyncio
async def test_already_off_is_a_tool_error(server_and_service):
    server, service = server_and_service
    with pytest.raises(ToolError, match="already off"):
        await server.call_tool("turn_off_lightbulb", {})
    assert service.get_lightbulb_status() == "The lightbulb is off"


@pytest.mark.asyncio
async def test_log_failure_is_a_tool_error(tmp_path):
    service = LightbulbService.with_file_log(str(tmp_path / "lightbulb.log"))
    server = build_stdio_server(service)

    with patch.object(FileActivityLog, "append", side_effect=ActivityLogError("disk full")):
        with pytest.raises(ToolError, match="Failed to log event: disk full"):
            await server.call_tool("turn_on_lightbulb", {})
    assert service.get_lightbulb_status() == "The lightbulb is on"


def test_initialize_reports_runtime_version():
    server = build_stdio_server(LightbulbService.in_memory(), version="9.9.9")
    options = server._mcp_server.create_initialization_options()
    assert options.server_name == "lightbulb"
    assert options.server_version == "9.9.9"
