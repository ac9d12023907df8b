"""Integration tests for RealGit against throwaway repositories."""

import os
import shutil
import subprocess
from pathlib import Path

import pytest

from git_recent.core.branch_record import collect_branch_records
from git_recent.core.ranking import rank_branch_records
from git_recent.gateway.git.real import RealGit
from git_recent.gateway.git.types import CheckedOut, CheckoutFailed, CommitInfo, CommitNotFound

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def _git(repo: Path, *args: str, date: str = "@1700000000 +0000") -> str:
    env = {
        **os.environ,
        "GIT_CONFIG_NOSYSTEM": "1",
        "HOME": str(repo),
        "GIT_AUTHOR_NAME": "Test Author",
        "GIT_AUTHOR_EMAIL": "author@example.com",
        "GIT_COMMITTER_NAME": "Test Committer",
        "GIT_COMMITTER_EMAIL": "committer@example.com",
        "GIT_AUTHOR_DATE": date,
        "GIT_COMMITTER_DATE": date,
    }
    result = subprocess.run(
        ["git", *args], cwd=repo, env=env, capture_output=True, text=True, check=True
    )
    return result.stdout.strip()


def _commit(repo: Path, filename: str, content: str, message: str, date: str) -> None:
    (repo / filename).write_text(content, encoding="utf-8")
    _git(repo, "add", filename)
    _git(repo, "commit", "-q", "-m", message, date=date)


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """Repository with main (t=100), feature (t=300) and bugfix (t=200); HEAD on main."""
    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init", "-q")
    _git(repo, "symbolic-ref", "HEAD", "refs/heads/main")
    _commit(repo, "app.txt", "base\n", "Initial commit", "@100 +0000")

    _git(repo, "checkout", "-q", "-b", "feature")
    _commit(repo, "app.txt", "feature\n", "Add feature", "@300 +0200")

    _git(repo, "checkout", "-q", "-b", "bugfix", "main")
    _commit(repo, "fix.txt", "fix\n", "Fix crash\n\nLonger body.", "@200 -0130")

    _git(repo, "checkout", "-q", "main")
    return repo


def test_get_repository_root_from_subdirectory(repo: Path) -> None:
    sub = repo / "nested"
    sub.mkdir()

    assert RealGit().get_repository_root(sub) == repo.resolve()


def test_get_repository_root_outside_repo(tmp_path: Path) -> None:
    outside = tmp_path / "plain"
    outside.mkdir()
    (outside / ".git").write_text("", encoding="utf-8")  # not a valid repository

    assert RealGit().get_repository_root(outside) is None


def test_clean_repository(repo: Path) -> None:
    assert RealGit().is_operation_in_progress(repo) is False


def test_merge_in_progress(repo: Path) -> None:
    head = _git(repo, "rev-parse", "HEAD")
    (repo / ".git" / "MERGE_HEAD").write_text(head + "\n", encoding="utf-8")

    assert RealGit().is_operation_in_progress(repo) is True


def test_rebase_in_progress(repo: Path) -> None:
    (repo / ".git" / "rebase-merge").mkdir()

    assert RealGit().is_operation_in_progress(repo) is True


def test_head_ref(repo: Path) -> None:
    assert RealGit().get_head_ref(repo) == "refs/heads/main"


def test_head_ref_detached(repo: Path) -> None:
    _git(repo, "checkout", "-q", "--detach", "feature")

    assert RealGit().get_head_ref(repo) is None


def test_list_local_branches(repo: Path) -> None:
    branches = RealGit().list_local_branches(repo)

    by_name = {b.name: b for b in branches}
    assert set(by_name) == {b"main", b"feature", b"bugfix"}
    assert by_name[b"feature"].ref_name == b"refs/heads/feature"
    assert by_name[b"feature"].tip_sha == _git(repo, "rev-parse", "feature")


def test_list_local_branches_keeps_slashes_in_names(repo: Path) -> None:
    _git(repo, "branch", "user/topic", "main")

    names = {b.name for b in RealGit().list_local_branches(repo)}

    assert b"user/topic" in names


def test_resolve_commit(repo: Path) -> None:
    sha = _git(repo, "rev-parse", "bugfix")

    info = RealGit().resolve_commit(repo, sha)

    assert info == CommitInfo(
        time_seconds=200,
        offset_minutes=-90,
        summary=b"Fix crash",
        author_name=b"Test Author",
    )


def test_resolve_commit_unknown_sha(repo: Path) -> None:
    result = RealGit().resolve_commit(repo, "0" * 40)

    assert isinstance(result, CommitNotFound)


def test_records_ranked_by_commit_time(repo: Path) -> None:
    records = rank_branch_records(collect_branch_records(RealGit(), repo))

    assert [r.name for r in records] == ["feature", "bugfix", "main"]
    assert [r.is_current_branch for r in records] == [False, False, True]
    assert records[0].offset_minutes == 120


def test_checkout_switches_branch(repo: Path) -> None:
    git = RealGit()
    sha = _git(repo, "rev-parse", "feature")

    result = git.checkout_tree_and_set_head(repo, sha, "refs/heads/feature")

    assert result == CheckedOut(ref_name="refs/heads/feature")
    assert git.get_head_ref(repo) == "refs/heads/feature"
    assert (repo / "app.txt").read_text(encoding="utf-8") == "feature\n"
    assert _git(repo, "status", "--porcelain") == ""


def test_checkout_refuses_conflicting_local_changes(repo: Path) -> None:
    git = RealGit()
    (repo / "app.txt").write_text("local edit\n", encoding="utf-8")
    sha = _git(repo, "rev-parse", "feature")

    result = git.checkout_tree_and_set_head(repo, sha, "refs/heads/feature")

    assert isinstance(result, CheckoutFailed)
    assert git.get_head_ref(repo) == "refs/heads/main"
    assert (repo / "app.txt").read_text(encoding="utf-8") == "local edit\n"


def test_checkout_keeps_unrelated_local_changes(repo: Path) -> None:
    git = RealGit()
    (repo / "notes.txt").write_text("untracked\n", encoding="utf-8")
    sha = _git(repo, "rev-parse", "bugfix")

    result = git.checkout_tree_and_set_head(repo, sha, "refs/heads/bugfix")

    assert isinstance(result, CheckedOut)
    assert (repo / "notes.txt").read_text(encoding="utf-8") == "untracked\n"
    assert (repo / "fix.txt").exists()


def test_checkout_ignores_timestamp_only_changes(repo: Path) -> None:
    git = RealGit()
    app = repo / "app.txt"
    app.write_text("base\n", encoding="utf-8")
    stat = app.stat()
    os.utime(app, (stat.st_atime + 10, stat.st_mtime + 10))
    sha = _git(repo, "rev-parse", "feature")

    result = git.checkout_tree_and_set_head(repo, sha, "refs/heads/feature")

    assert result == CheckedOut(ref_name="refs/heads/feature")
    assert git.get_head_ref(repo) == "refs/heads/feature"
    assert app.read_text(encoding="utf-8") == "feature\n"


def test_checkout_unknown_revision(repo: Path) -> None:
    git = RealGit()

    result = git.checkout_tree_and_set_head(repo, "f" * 40, "refs/heads/feature")

    assert isinstance(result, CheckoutFailed)
    assert "not found" in result.reason
    assert git.get_head_ref(repo) == "refs/heads/main"
