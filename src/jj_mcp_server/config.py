"""Server configuration loaded from environment variables."""

import os
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigError

DEFAULT_COMMAND = "jj"

_TRUE_WORDS = {"1", "true", "yes", "on"}
_FALSE_WORDS = {"0", "false", "no", "off"}


def _parse_bool(name: str, value: Optional[str], default: bool) -> bool:
    if value is None or value.strip() == "":
        return default

    word = value.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ConfigError(f"{name} must be a boolean (true/false), got {value!r}")


@dataclass(frozen=True)
class ServerConfig:
    """Settings shared by every tool invocation."""

    command: str = DEFAULT_COMMAND
    audit_log: Optional[str] = None
    verbose: bool = False

    @classmethod
    def from_environment(cls) -> "ServerConfig":
        """
        Load configuration from environment variables.

        Reads JJ_MCP_COMMAND (executable to run, default "jj"),
        JJ_MCP_AUDIT_LOG (audit log path, auditing disabled when unset)
        and JJ_MCP_VERBOSE (echo invocations to stderr).

        Returns:
            ServerConfig built from the current environment

        Raises:
            ConfigError if a variable holds an unusable value
        """
        command = os.getenv("JJ_MCP_COMMAND")
        if command is None:
            command = DEFAULT_COMMAND
        elif not command.strip():
            raise ConfigError("JJ_MCP_COMMAND is set but empty")

        audit_log = os.getenv("JJ_MCP_AUDIT_LOG") or None
        verbose = _parse_bool("JJ_MCP_VERBOSE", os.getenv("JJ_MCP_VERBOSE"), False)

        return cls(command=command.strip(), audit_log=audit_log, verbose=verbose)
