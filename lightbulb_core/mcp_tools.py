"""
MCP Tool and Resource catalogue for Lightbulb Core

Single source of tool names, descriptions and resource URIs. Both the
stdio server and the HTTP blueprint register from these lists.
"""

from typing import Callable, Dict, List, Optional

from lightbulb_core.service import LightbulbService

EMPTY_INPUT_SCHEMA = {"type": "object", "properties": {}}


class MCPTool:
    """Represents an MCP tool bound to a LightbulbService method"""
    def __init__(self, name: str, description: str, handler: str, input_schema: Dict = None):
        self.name = name
        self.description = description
        self.handler = handler
        self.input_schema = input_schema or EMPTY_INPUT_SCHEMA

    def bind(self, service: LightbulbService) -> Callable[[], str]:
        return getattr(service, self.handler)

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema
        }


class MCPResource:
    """Represents a read-only MCP text resource"""
    def __init__(self, uri: str, name: str, description: str, handler: str,
                 mime_type: str = "text/plain"):
        self.uri = uri
        self.name = name
        self.description = description
        self.handler = handler
        self.mime_type = mime_type

    def bind(self, service: LightbulbService) -> Callable[[], str]:
        return getattr(service, self.handler)

    def to_dict(self) -> Dict:
        return {
            "uri": self.uri,
            "name": self.name,
            "description": self.description,
            "mimeType": self.mime_type
        }


LIGHTBULB_TOOLS = [
    MCPTool(
        name="get_lightbulb_status",
        description="Get the current status of the lightbulb",
        handler="get_lightbulb_status",
    ),
    MCPTool(
        name="turn_on_lightbulb",
        description="Turn on the lightbulb",
        handler="turn_on_lightbulb",
    ),
    MCPTool(
        name="turn_off_lightbulb",
        description="Turn off the lightbulb",
        handler="turn_off_lightbulb",
    ),
]

LIGHTBULB_RESOURCES = [
    MCPResource(
        uri="lightbulb://log",
        name="Lightbulb Activity Log",
        description="Complete history of lightbulb on/off actions with timestamps",
        handler="read_activity_log",
    ),
    MCPResource(
        uri="lightbulb://summary",
        name="Lightbulb Usage Summary",
        description="Summary statistics of lightbulb usage patterns",
        handler="usage_summary",
    ),
]


def get_tools() -> List[Dict]:
    """Get all available tools in MCP format"""
    return [tool.to_dict() for tool in LIGHTBULB_TOOLS]


def get_tool_by_name(name: str) -> Optional[MCPTool]:
    """Get a specific tool by name (case-sensitive)"""
    for tool in LIGHTBULB_TOOLS:
        if tool.name == name:
            return tool
    return None


def get_resources() -> List[Dict]:
    """Get all available resources in MCP format"""
    return [resource.to_dict() for resource in LIGHTBULB_RESOURCES]


def get_resource_by_uri(uri: str) -> Optional[MCPResource]:
    """Get a specific resource by URI"""
    for resource in LIGHTBULB_RESOURCES:
        if resource.uri == uri:
            return resource
    return None
