"""Read-only jj tools: status, log, diff."""

from typing import List

from ..params import DiffParams, LogParams, StatusParams
from ..runner import JjRunner, add_repo_args
from . import CWD_PROPERTY, REPO_PATH_PROPERTY, JjToolHandler


class StatusTool(JjToolHandler):
    """Tool for showing working-copy status."""

    params_model = StatusParams
    description = "Show the status of the working directory"
    properties = {
        "repoPath": REPO_PATH_PROPERTY,
        "cwd": CWD_PROPERTY,
    }

    def __init__(self, runner: JjRunner):
        super().__init__("status", runner)

    def build_args(self, params: StatusParams) -> List[str]:
        args = ["status"]
        add_repo_args(args, params.repo_path)
        return args


class LogTool(JjToolHandler):
    """Tool for showing commit history."""

    params_model = LogParams
    description = "Show commit history"
    properties = {
        "limit": {
            "type": "number",
            "description": "Maximum number of commits to show",
        },
        "template": {
            "type": "string",
            "description": "Template for formatting output",
        },
        "revisions": {
            "type": "string",
            "description": "Revisions to show",
        },
        "repoPath": REPO_PATH_PROPERTY,
        "cwd": CWD_PROPERTY,
    }

    def __init__(self, runner: JjRunner):
        super().__init__("log", runner)

    def build_args(self, params: LogParams) -> List[str]:
        args = ["log"]

        if params.limit is not None:
            args.extend(["-n", str(params.limit)])

        if params.template is not None:
            args.extend(["-T", params.template])

        # Revset is positional
        if params.revisions is not None:
            args.append(params.revisions)

        add_repo_args(args, params.repo_path)
        return args


class DiffTool(JjToolHandler):
    """Tool for comparing file contents between revisions."""

    params_model = DiffParams
    description = "Show differences between revisions"
    properties = {
        "from": {
            "type": "string",
            "description": "Source revision",
        },
        "to": {
            "type": "string",
            "description": "Target revision",
        },
        "paths": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Specific paths to diff",
        },
        "context": {
            "type": "number",
            "description": "Number of context lines",
        },
        "summary": {
            "type": "boolean",
            "description": "Show summary only",
        },
        "stat": {
            "type": "boolean",
            "description": "Show file statistics",
        },
        "repoPath": REPO_PATH_PROPERTY,
        "cwd": CWD_PROPERTY,
    }

    def __init__(self, runner: JjRunner):
        super().__init__("diff", runner)

    def build_args(self, params: DiffParams) -> List[str]:
        args = ["diff"]

        if params.from_ is not None:
            args.extend(["--from", params.from_])

        if params.to is not None:
            args.extend(["--to", params.to])

        if params.context is not None:
            args.extend(["--context", str(params.context)])

        if params.summary is True:
            args.append("--summary")

        if params.stat is True:
            args.append("--stat")

        if params.paths:
            args.extend(params.paths)

        add_repo_args(args, params.repo_path)
        return args
