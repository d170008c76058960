"""Audit logging for jj invocations."""

import sys
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional


class AuditLogger:
    """Append-only audit trail of every jj command the server runs."""

    def __init__(self, log_path: Optional[str] = None):
        """
        Initialize audit logger.

        Args:
            log_path: Path to audit log file. When None, entries are discarded.
        """
        self.log_path = Path(log_path).expanduser() if log_path else None
        self._lock = threading.Lock()

    @property
    def enabled(self) -> bool:
        return self.log_path is not None

    def log(self, action: str, command: str, details: str, user: str = "mcp-server"):
        """
        Write audit log entry.

        Args:
            action: Outcome of the invocation (SUCCESS, FAILED, LAUNCH_FAILED)
            command: Tool or jj subcommand that was run
            details: Argument vector, working directory and exit status
            user: User/source of the action
        """
        if self.log_path is None:
            return

        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
        log_entry = "[{0}] USER={1} ACTION={2} COMMAND={3} DETAILS={4}\n".format(
            timestamp, user, action, command, details
        )

        try:
            with self._lock:
                with open(self.log_path, "a", encoding="utf-8") as f:
                    f.write(log_entry)
        except OSError as e:
            print(f"Warning: Could not write to audit log: {e}", file=sys.stderr)
