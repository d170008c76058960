"""Repository bootstrap tool: git-clone."""

from typing import List, Optional

from ..params import GitCloneParams
from ..runner import JjRunner
from . import JjToolHandler


class GitCloneTool(JjToolHandler):
    """
    Tool for cloning a Git repository into a new jj repository.

    No repository exists yet when this runs, so it never takes repoPath and
    always runs in the server's own working directory.
    """

    params_model = GitCloneParams
    description = "Clone a Git repository using jj"
    properties = {
        "source": {
            "type": "string",
            "description": "Git repository URL to clone",
        },
        "destination": {
            "type": "string",
            "description": "Destination directory",
        },
        "colocate": {
            "type": "boolean",
            "description": "Create a colocated jj/git repository",
        },
        "remote": {
            "type": "string",
            "description": "Name for the remote",
        },
        "depth": {
            "type": "number",
            "description": "Depth for shallow clone",
        },
    }

    def __init__(self, runner: JjRunner):
        super().__init__("git-clone", runner)

    def build_args(self, params: GitCloneParams) -> List[str]:
        args = ["git", "clone"]

        if params.source is not None:
            args.append(params.source)

        if params.destination is not None:
            args.append(params.destination)

        if params.colocate is True:
            args.append("--colocate")

        if params.remote is not None:
            args.extend(["--remote", params.remote])

        if params.depth is not None:
            args.extend(["--depth", str(params.depth)])

        return args

    def working_directory(self, params: GitCloneParams) -> Optional[str]:
        return None
