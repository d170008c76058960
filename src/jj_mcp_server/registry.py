"""Tool registry: the static catalogue of jj tools and name-based dispatch."""

from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from mcp.types import CallToolResult, Tool

from .audit import AuditLogger
from .config import ServerConfig
from .errors import DuplicateToolError
from .runner import JjRunner
from .tools import ToolHandler, text_result
from .tools.clone import GitCloneTool
from .tools.read import DiffTool, LogTool, StatusTool
from .tools.write import CommitTool, NewTool, RebaseTool


class ToolRegistry:
    """Maps tool names to handlers and routes calls to them."""

    def __init__(self):
        self._handlers: Dict[str, ToolHandler] = {}

    def register(self, handler: ToolHandler) -> None:
        """
        Add a handler under its name.

        Raises:
            DuplicateToolError if the name is already registered
        """
        if handler.name in self._handlers:
            raise DuplicateToolError(f"Tool already registered: {handler.name}")
        self._handlers[handler.name] = handler

    @property
    def handlers(self) -> Mapping[str, ToolHandler]:
        return MappingProxyType(self._handlers)

    def names(self) -> List[str]:
        return list(self._handlers)

    def list_tools(self) -> List[Tool]:
        return [handler.get_tool_description() for handler in self._handlers.values()]

    def dispatch(self, name: str, arguments: Any = None) -> CallToolResult:
        """
        Execute the named tool.

        Never raises: unknown names and handler failures come back as
        results with isError set.

        Args:
            name: Tool name to execute
            arguments: Raw tool arguments from MCP (may be None)

        Returns:
            CallToolResult with exactly one text item
        """
        handler = self._handlers.get(name)

        if handler is None:
            return text_result(f"Unknown tool: {name}", is_error=True)

        try:
            return handler.run_tool(arguments)
        except Exception as e:
            return text_result(
                f"Error executing {name}: {type(e).__name__}: {e}", is_error=True
            )


def create_registry(
    runner: Optional[JjRunner] = None, config: Optional[ServerConfig] = None
) -> ToolRegistry:
    """
    Build the registry holding every jj tool.

    Args:
        runner: Runner shared by all tools. Built from config when omitted.
        config: Server configuration (defaults used when omitted)

    Returns:
        Populated ToolRegistry
    """
    if runner is None:
        config = config or ServerConfig()
        runner = JjRunner(
            command=config.command,
            audit=AuditLogger(config.audit_log),
            verbose=config.verbose,
        )

    registry = ToolRegistry()
    for tool_class in (StatusTool, RebaseTool, CommitTool, NewTool, LogTool, DiffTool, GitCloneTool):
        registry.register(tool_class(runner))
    return registry
