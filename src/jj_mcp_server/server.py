"""MCP server setup and tool registration for jj-mcp-server."""

from typing import Any, Optional

import anyio.to_thread
from mcp.server import Server
from mcp.types import CallToolResult, Tool

from .config import ServerConfig
from .registry import ToolRegistry, create_registry

SERVER_NAME = "jj-mcp-server"
SERVER_VERSION = "1.0.0"

# Create MCP server
app = Server(SERVER_NAME, version=SERVER_VERSION)

_registry: Optional[ToolRegistry] = None


def get_registry() -> ToolRegistry:
    """
    Get or create the global tool registry.

    Built from environment configuration on first use.

    Returns:
        ToolRegistry instance
    """
    global _registry

    if _registry is None:
        _registry = create_registry(config=ServerConfig.from_environment())

    return _registry


def set_registry(registry: Optional[ToolRegistry]) -> None:
    """Install the registry used by the MCP handlers (None resets it)."""
    global _registry
    _registry = registry


@app.list_tools()
async def list_tools() -> list[Tool]:
    """
    List all available jj tools.

    Returns:
        List of Tool descriptions for MCP
    """
    return get_registry().list_tools()


# Schemas are advertised for discovery; arguments are decoded leniently by each tool
@app.call_tool(validate_input=False)
async def call_tool(name: str, arguments: Any) -> CallToolResult:
    """
    Execute a jj tool with given arguments.

    The jj process blocks until it exits, so dispatch runs on a worker
    thread to keep the transport loop serving other requests.

    Args:
        name: Tool name to execute
        arguments: Tool arguments from MCP

    Returns:
        CallToolResult with one text item; isError marks failures
    """
    registry = get_registry()
    return await anyio.to_thread.run_sync(registry.dispatch, name, arguments)
