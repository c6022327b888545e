"""
Lightbulb MCP Server -- HTTP transport.

Implements the Model Context Protocol over HTTP POST (JSON-RPC 2.0) so
clients that cannot spawn a stdio process can still drive the bulb:
  - get_lightbulb_status / turn_on_lightbulb / turn_off_lightbulb tools
  - lightbulb://log and lightbulb://summary resources

Endpoint: /mcp  (JSON-RPC 2.0 over HTTP POST)

The MCP protocol uses JSON-RPC 2.0 with these methods:
  initialize       -> server capabilities
  tools/list       -> available tools
  tools/call       -> execute a tool
  resources/list   -> available resources
  resources/read   -> read a resource
  ping             -> liveness
"""

import logging

from flask import Blueprint, current_app, jsonify, request

from lightbulb_core.bulb import LightbulbError
from lightbulb_core.mcp_tools import (
    get_resource_by_uri,
    get_resources,
    get_tool_by_name,
    get_tools,
)

logger = logging.getLogger(__name__)

mcp_bp = Blueprint('mcp', __name__, url_prefix='/mcp')

PROTOCOL_VERSION = "2025-03-26"
SERVER_NAME = "lightbulb"
SERVER_INSTRUCTIONS = "Service for managing lights"

MCP_CAPABILITIES = {
    "tools": {},
    "resources": {},
    "logging": {},
}

# JSON-RPC 2.0 error codes
PARSE_ERROR = -32700
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class JsonRpcError(Exception):
    def __init__(self, code: int, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


def _service():
    return current_app.config["LIGHTBULB_SERVICE"]


def _server_info() -> dict:
    cfg = current_app.config.get("LIGHTBULB_CFG")
    version = cfg.version if cfg is not None else "0.0.0"
    return {"name": SERVER_NAME, "version": version}


# ------------------------------------------------------------------
# Tool / resource execution
# ------------------------------------------------------------------

def _execute_mcp_tool(name: str) -> dict:
    """Run a tool and wrap its outcome as an MCP CallToolResult."""
    tool = get_tool_by_name(name)
    if tool is None:
        raise JsonRpcError(INVALID_PARAMS, f"Unknown tool: {name}")

    try:
        text = tool.bind(_service())()
        is_error = False
    except LightbulbError as exc:
        logger.info("MCP tool %s rejected: %s", name, exc)
        text = str(exc)
        is_error = True

    return {
        "content": [{"type": "text", "text": text}],
        "isError": is_error,
    }


def _read_mcp_resource(uri: str) -> dict:
    resource = get_resource_by_uri(uri)
    if resource is None:
        raise JsonRpcError(INVALID_PARAMS, "Unknown resource URI")

    text = resource.bind(_service())()
    return {
        "contents": [{"uri": uri, "mimeType": resource.mime_type, "text": text}],
    }


# ------------------------------------------------------------------
# JSON-RPC 2.0 handler
# ------------------------------------------------------------------

@mcp_bp.route('', methods=['POST'])
def mcp_endpoint():
    """MCP Streamable HTTP endpoint (JSON-RPC 2.0)."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return _jsonrpc_error(None, PARSE_ERROR, "Parse error")

    method = data.get("method", "")
    params = data.get("params") or {}
    req_id = data.get("id")

    try:
        if method == "initialize":
            return _jsonrpc_result(req_id, {
                "protocolVersion": PROTOCOL_VERSION,
                "capabilities": MCP_CAPABILITIES,
                "serverInfo": _server_info(),
                "instructions": SERVER_INSTRUCTIONS,
            })

        elif method == "notifications/initialized":
            # Notifications get no JSON-RPC response body.
            return "", 202

        elif method == "tools/list":
            return _jsonrpc_result(req_id, {"tools": get_tools()})

        elif method == "tools/call":
            return _jsonrpc_result(req_id, _execute_mcp_tool(params.get("name", "")))

        elif method == "resources/list":
            return _jsonrpc_result(req_id, {"resources": get_resources()})

        elif method == "resources/read":
            return _jsonrpc_result(req_id, _read_mcp_resource(params.get("uri", "")))

        elif method == "ping":
            return _jsonrpc_result(req_id, {})

        else:
            return _jsonrpc_error(req_id, METHOD_NOT_FOUND, f"Method not found: {method}")

    except JsonRpcError as exc:
        return _jsonrpc_error(req_id, exc.code, exc.message)
    except Exception:
        logger.exception("MCP endpoint error")
        return _jsonrpc_error(req_id, INTERNAL_ERROR, "Internal server error")


def _jsonrpc_result(req_id, result):
    return jsonify({"jsonrpc": "2.0", "id": req_id, "result": result})


def _jsonrpc_error(req_id, code, message):
    return jsonify({"jsonrpc": "2.0", "id": req_id, "error": {"code": code, "message": message}})
