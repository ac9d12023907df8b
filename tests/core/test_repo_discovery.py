"""Tests for repository discovery."""

from pathlib import Path

from git_recent.core.repo_discovery import RepoContext, RepoNotFound, discover_repo
from git_recent.gateway.git.fake import FakeGit


def test_discovers_enclosing_repository() -> None:
    git = FakeGit(repository_roots={Path("/repo/src"): Path("/repo")})

    assert discover_repo(git, Path("/repo/src")) == RepoContext(root=Path("/repo"))


def test_reports_missing_repository() -> None:
    result = discover_repo(FakeGit(), Path("/tmp/elsewhere"))

    assert isinstance(result, RepoNotFound)
    assert result.error_type == "repo-not-found"
    assert result.message == "Not a git repository: /tmp/elsewhere"
