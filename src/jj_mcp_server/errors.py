"""Exception types for jj-mcp-server."""


class JjMcpError(Exception):
    """Base class for jj-mcp-server errors."""

    pass


class ConfigError(JjMcpError):
    """Raised when server configuration from the environment is invalid."""

    pass


class DuplicateToolError(JjMcpError, ValueError):
    """Raised when a tool name is registered twice."""

    pass
