"""Tool base classes for jj MCP tools."""

from typing import Any, Dict, List, Optional, Type

from mcp.types import CallToolResult, TextContent, Tool

from ..params import ToolParams, parse_params
from ..runner import JjResponse, JjRunner

REPO_PATH_PROPERTY = {
    "type": "string",
    "description": "Optional path to repo root",
}

CWD_PROPERTY = {
    "type": "string",
    "description": "Optional working directory",
}


def text_result(text: str, is_error: bool) -> CallToolResult:
    """Wrap text in the single-item MCP response envelope."""
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)


class ToolHandler:
    """A named MCP tool: advertises a schema and answers calls with one text result."""

    def __init__(self, name: str):
        self.name = name

    def get_tool_description(self) -> Tool:
        """Descriptor (name, description, inputSchema) advertised by tools/list."""
        raise NotImplementedError

    def run_tool(self, arguments: Any) -> CallToolResult:
        """
        Answer a tools/call for this tool.

        Implementations must not raise for bad input or a failed jj run:
        the result holds exactly one TextContent, and isError is True when
        the command could not run or exited non-zero.

        Args:
            arguments: Raw arguments from the request; None, non-objects and
                malformed fields are all acceptable

        Returns:
            Single-item CallToolResult
        """
        raise NotImplementedError


class JjToolHandler(ToolHandler):
    """
    Handler that maps a parameter model onto one jj invocation.

    Subclasses set `params_model`, `description` and `properties`, and
    implement `build_args`. Everything else (decoding, running, wrapping the
    result) is shared.
    """

    params_model: Type[ToolParams] = ToolParams
    description: str = ""
    properties: Dict[str, Any] = {}

    def __init__(self, name: str, runner: JjRunner):
        super().__init__(name)
        self.runner = runner

    def get_tool_description(self) -> Tool:
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema={"type": "object", "properties": dict(self.properties)},
        )

    def build_args(self, params: ToolParams) -> List[str]:
        """Build the ordered jj argument vector for params."""
        raise NotImplementedError

    def working_directory(self, params: ToolParams) -> Optional[str]:
        return getattr(params, "cwd", None)

    def execute(self, params: ToolParams) -> JjResponse:
        return self.runner.run(self.build_args(params), self.working_directory(params))

    def run_tool(self, arguments: Any) -> CallToolResult:
        params = parse_params(self.params_model, arguments)
        response = self.execute(params)
        return text_result(response.text, is_error=not response.success)
