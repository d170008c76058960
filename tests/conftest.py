"""
jj-mcp-server Test Configuration
--------------------------------
Shared fixtures. `fake_jj` replaces subprocess.run inside the runner so
tests never depend on a real jj binary.
"""

import subprocess
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pytest

from jj_mcp_server import server
from jj_mcp_server.registry import create_registry
from jj_mcp_server.runner import JjRunner


@dataclass
class Call:
    argv: List[str]
    kwargs: Dict[str, Any]

    @property
    def args(self) -> List[str]:
        """Arguments after the executable."""
        return self.argv[1:]

    @property
    def cwd(self) -> Optional[str]:
        return self.kwargs.get("cwd")


@dataclass
class FakeJj:
    """Scripted stand-in for subprocess.run."""

    stdout: str = ""
    stderr: str = ""
    returncode: int = 0
    raises: Optional[BaseException] = None
    calls: List[Call] = field(default_factory=list)

    def __call__(self, argv, **kwargs):
        self.calls.append(Call(list(argv), kwargs))
        if self.raises is not None:
            raise self.raises
        return subprocess.CompletedProcess(
            argv, self.returncode, stdout=self.stdout, stderr=self.stderr
        )

    @property
    def last(self) -> Call:
        assert self.calls, "jj was never invoked"
        return self.calls[-1]


@pytest.fixture
def fake_jj(monkeypatch):
    fake = FakeJj()
    monkeypatch.setattr("jj_mcp_server.runner.subprocess.run", fake)
    return fake


@pytest.fixture
def runner():
    return JjRunner(command="jj")


@pytest.fixture
def registry(runner):
    return create_registry(runner)


@pytest.fixture
def installed_registry(registry):
    """Install a registry on the MCP server module for the duration of a test."""
    server.set_registry(registry)
    yield registry
    server.set_registry(None)


@pytest.fixture
def anyio_backend():
    return "asyncio"
