"""jj-mcp-server: Model Context Protocol server for the Jujutsu (jj) version control system."""

import asyncio
import sys

from .config import ServerConfig
from .errors import ConfigError
from .registry import create_registry
from .server import SERVER_VERSION, app, set_registry


async def main():
    """Serve the jj tools over stdin/stdout until the client disconnects."""
    from mcp.server.stdio import stdio_server

    options = app.create_initialization_options()
    async with stdio_server() as (client_in, client_out):
        await app.run(client_in, client_out, options)


def run():
    """Synchronous wrapper for main() to use as console script entry point."""
    try:
        set_registry(create_registry(config=ServerConfig.from_environment()))
        print("jj MCP Server starting...", file=sys.stderr)
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\njj MCP Server stopped.", file=sys.stderr)
        sys.exit(0)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        sys.exit(1)


__version__ = SERVER_VERSION
__all__ = ["main", "run", "app"]
