"""History-changing jj tools: rebase, commit, new."""

from typing import List

from ..params import CommitParams, NewParams, RebaseParams
from ..runner import JjRunner, add_repo_args
from . import CWD_PROPERTY, REPO_PATH_PROPERTY, JjToolHandler


class RebaseTool(JjToolHandler):
    """Tool for moving a revision (and its descendants) onto another."""

    params_model = RebaseParams
    description = "Rebase a revision onto another"
    properties = {
        "source": {
            "type": "string",
            "description": "Source revision to rebase",
        },
        "destination": {
            "type": "string",
            "description": "Destination revision to rebase onto",
        },
        "repoPath": REPO_PATH_PROPERTY,
        "cwd": CWD_PROPERTY,
    }

    def __init__(self, runner: JjRunner):
        super().__init__("rebase", runner)

    def build_args(self, params: RebaseParams) -> List[str]:
        args = ["rebase"]

        if params.source is not None:
            args.extend(["-s", params.source])

        if params.destination is not None:
            args.extend(["-d", params.destination])

        add_repo_args(args, params.repo_path)
        return args


class CommitTool(JjToolHandler):
    """Tool for finalizing the working-copy change."""

    params_model = CommitParams
    description = "Create a new commit"
    properties = {
        "message": {
            "type": "string",
            "description": "Commit message",
        },
        "repoPath": REPO_PATH_PROPERTY,
        "cwd": CWD_PROPERTY,
    }

    def __init__(self, runner: JjRunner):
        super().__init__("commit", runner)

    def build_args(self, params: CommitParams) -> List[str]:
        args = ["commit"]

        # jj opens an editor when -m is missing
        if params.message is not None:
            args.extend(["-m", params.message])

        add_repo_args(args, params.repo_path)
        return args


class NewTool(JjToolHandler):
    """Tool for starting a new empty change."""

    params_model = NewParams
    description = "Create a new empty commit"
    properties = {
        "parents": {
            "type": "string",
            "description": "Parent revisions for the new commit",
        },
        "repoPath": REPO_PATH_PROPERTY,
        "cwd": CWD_PROPERTY,
    }

    def __init__(self, runner: JjRunner):
        super().__init__("new", runner)

    def build_args(self, params: NewParams) -> List[str]:
        args = ["new"]

        if params.parents is not None:
            args.append(params.parents)

        add_repo_args(args, params.repo_path)
        return args
