"""Repository discovery from the invocation directory."""

from dataclasses import dataclass
from pathlib import Path

from git_recent.gateway.git.abc import Git
from git_recent.non_ideal_state import NonIdealState


@dataclass(frozen=True)
class RepoContext:
    """The repository git-recent operates on.

    Attributes:
        root: Working tree root of the discovered repository
    """

    root: Path


@dataclass(frozen=True)
class RepoNotFound(NonIdealState):
    """Error: the invocation directory is not inside a git repository."""

    cwd: Path

    @property
    def error_type(self) -> str:
        return "repo-not-found"

    @property
    def message(self) -> str:
        return f"Not a git repository: {self.cwd}"


def discover_repo(git: Git, cwd: Path) -> RepoContext | RepoNotFound:
    """Find the repository containing cwd.

    Args:
        git: Git gateway
        cwd: Directory git-recent was invoked from

    Returns:
        RepoContext for the enclosing repository, or RepoNotFound
    """
    root = git.get_repository_root(cwd)
    if root is None:
        return RepoNotFound(cwd=cwd)
    return RepoContext(root=root)
