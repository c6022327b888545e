"""
Lightbulb Core Package

A simulated on/off lightbulb exposed as MCP tools:
- Bulb: lock-guarded on/off state
- Activity Log: timestamped, append-only record of every transition
- Service: tool handlers and informational resources
- Transports: stdio (mcp SDK) and HTTP (Flask blueprint at /mcp)
"""

__version__ = "0.1.0"
