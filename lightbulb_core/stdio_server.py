"""
Lightbulb MCP Server -- stdio transport.

Line-delimited JSON-RPC 2.0 over stdin/stdout, handled entirely by the
``mcp`` SDK (FastMCP). This module only registers the catalogue from
``mcp_tools`` against one ``LightbulbService``.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from lightbulb_core.bulb import LightbulbError
from lightbulb_core.mcp_server import SERVER_INSTRUCTIONS, SERVER_NAME
from lightbulb_core.mcp_tools import LIGHTBULB_RESOURCES, LIGHTBULB_TOOLS
from lightbulb_core.service import LightbulbService
from lightbulb_core.versioning import get_runtime_version

logger = logging.getLogger(__name__)

_FASTMCP_LEVELS = {
    "trace": "DEBUG",
    "debug": "DEBUG",
    "info": "INFO",
    "warn": "WARNING",
    "warning": "WARNING",
    "error": "ERROR",
}


def _as_tool(name: str, handler: Callable[[], str]) -> Callable[[], str]:
    def tool() -> str:
        logger.info("Tool called: %s", name)
        try:
            return handler()
        except LightbulbError as exc:
            raise ToolError(str(exc)) from exc

    tool.__name__ = name
    return tool


def build_stdio_server(
    service: LightbulbService,
    log_level: str = "info",
    version: Optional[str] = None,
) -> FastMCP:
    """Create a FastMCP server exposing ``service``."""
    server = FastMCP(
        SERVER_NAME,
        instructions=SERVER_INSTRUCTIONS,
        log_level=_FASTMCP_LEVELS.get(log_level, "INFO"),
    )
    # Reported as serverInfo.version on initialize.
    server._mcp_server.version = version or get_runtime_version()

    for tool in LIGHTBULB_TOOLS:
        server.add_tool(
            _as_tool(tool.name, tool.bind(service)),
            name=tool.name,
            description=tool.description,
        )

    for resource in LIGHTBULB_RESOURCES:
        server.resource(
            resource.uri,
            name=resource.name,
            description=resource.description,
            mime_type=resource.mime_type,
        )(resource.bind(service))

    return server


def run_stdio(
    service: LightbulbService,
    log_level: str = "info",
    version: Optional[str] = None,
) -> None:
    """Serve until stdin closes."""
    server = build_stdio_server(service, log_level, version)
    logger.info("Lightbulb MCP server listening on stdio")
    server.run(transport="stdio")
