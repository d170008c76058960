"""Typed parameter models for jj tools.

Every field is optional; a missing field means "use jj's default". Decoding
is best-effort: anything that fails validation yields the all-default model.
"""

from typing import Annotated, Any, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError

# JSON integer in jj's u32 range; strings, bools and floats are rejected
UInt32 = Annotated[int, Field(strict=True, ge=0, le=4294967295)]


class ToolParams(BaseModel):
    """Base for tool parameter models."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class RepoParams(ToolParams):
    """Parameters shared by every tool that runs inside a repository."""

    repo_path: Optional[str] = Field(default=None, alias="repoPath")
    cwd: Optional[str] = None


class StatusParams(RepoParams):
    pass


class RebaseParams(RepoParams):
    source: Optional[str] = None
    destination: Optional[str] = None


class CommitParams(RepoParams):
    message: Optional[str] = None


class NewParams(RepoParams):
    parents: Optional[str] = None


class LogParams(RepoParams):
    limit: Optional[UInt32] = None
    template: Optional[str] = None
    revisions: Optional[str] = None


class DiffParams(RepoParams):
    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None
    paths: Optional[List[str]] = None
    summary: Optional[StrictBool] = None
    stat: Optional[StrictBool] = None
    context: Optional[UInt32] = None


class GitCloneParams(ToolParams):
    """Clone runs before a repository exists, so it takes no repoPath or cwd."""

    source: Optional[str] = None
    destination: Optional[str] = None
    colocate: Optional[StrictBool] = None
    remote: Optional[str] = None
    depth: Optional[UInt32] = None


P = TypeVar("P", bound=ToolParams)


def parse_params(model: Type[P], arguments: Any) -> P:
    """
    Decode raw MCP arguments into a parameter model.

    Args:
        model: Parameter model class for the tool
        arguments: Untyped arguments from the MCP request (may be None)

    Returns:
        Validated model, or the all-default model when validation fails
    """
    if arguments is None:
        return model()
    try:
        return model.model_validate(arguments)
    except ValidationError:
        return model()
