"""Process runner for the jj command-line tool."""

import shlex
import subprocess
import sys
from dataclasses import dataclass
from typing import List, Optional

from .audit import AuditLogger
from .config import DEFAULT_COMMAND


@dataclass
class JjResponse:
    """Structured result of a single jj invocation."""
    success: bool
    output: str = ""
    error: Optional[str] = None
    exit_code: Optional[int] = None

    @property
    def text(self) -> str:
        """Text returned to the MCP client: stdout on success, an error line otherwise."""
        if self.success:
            return self.output
        return f"Error: {self.error or ''}"


def add_repo_args(args: List[str], repo_path: Optional[str]) -> None:
    """Append `-R <path>` to args when a repository path is given."""
    if repo_path is not None:
        args.append("-R")
        args.append(repo_path)


class JjRunner:
    """Runs jj synchronously and captures its output."""

    def __init__(
        self,
        command: str = DEFAULT_COMMAND,
        audit: Optional[AuditLogger] = None,
        verbose: bool = False,
    ):
        """
        Initialize jj runner.

        Args:
            command: Executable name or path (e.g., jj, /usr/local/bin/jj)
            audit: Audit logger receiving one entry per invocation
            verbose: Echo each command line to stderr before running it
        """
        self.command = command
        self.audit = audit or AuditLogger()
        self.verbose = verbose

    def run(self, args: List[str], cwd: Optional[str] = None) -> JjResponse:
        """
        Run jj with the given arguments and wait for it to exit.

        Args:
            args: Arguments passed after the executable, in order
            cwd: Working directory for the process (server cwd when None)

        Returns:
            JjResponse with trimmed stdout on success, trimmed stderr on failure
        """
        argv = [self.command] + list(args)
        subcommand = args[0] if args else ""

        if self.verbose:
            print(f"$ {shlex.join(argv)}", file=sys.stderr)

        try:
            result = subprocess.run(
                argv,
                cwd=cwd,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            self.audit.log("LAUNCH_FAILED", subcommand, self._details(argv, cwd, str(e)))
            return JjResponse(success=False, error=str(e))

        if result.returncode == 0:
            self.audit.log("SUCCESS", subcommand, self._details(argv, cwd, "exit=0"))
            return JjResponse(success=True, output=(result.stdout or "").strip(), exit_code=0)

        self.audit.log(
            "FAILED", subcommand, self._details(argv, cwd, f"exit={result.returncode}")
        )
        return JjResponse(
            success=False,
            error=(result.stderr or "").strip(),
            exit_code=result.returncode,
        )

    @staticmethod
    def _details(argv: List[str], cwd: Optional[str], status: str) -> str:
        return "argv={} cwd={} {}".format(shlex.join(argv), cwd or ".", status)
