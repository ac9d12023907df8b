"""Fake git gateway for testing."""

from pathlib import Path

from git_recent.gateway.git.abc import Git
from git_recent.gateway.git.types import (
    CheckedOut,
    CheckoutFailed,
    CommitInfo,
    CommitNotFound,
    LocalBranch,
)


class FakeGit(Git):
    """In-memory fake implementation of the git gateway.

    State Management:
    -----------------
    All repository state is provided via the constructor. A successful
    checkout_tree_and_set_head() moves HEAD to the requested ref, so later
    get_head_ref() calls observe the switch just like in a real repository.

    Mutation Tracking:
    -----------------
    - checkout_calls: every (repo_root, commit_sha, ref_name) passed to
      checkout_tree_and_set_head(), including failed attempts
    """

    def __init__(
        self,
        *,
        repository_roots: dict[Path, Path] | None = None,
        operation_in_progress: bool = False,
        head_ref: str | None = None,
        local_branches: list[LocalBranch] | None = None,
        commits: dict[str, CommitInfo] | None = None,
        list_branches_error: str | None = None,
        checkout_failure: str | None = None,
    ) -> None:
        """Create FakeGit with pre-configured state.

        Args:
            repository_roots: Mapping of cwd -> repository root. A cwd missing
                from the mapping is treated as outside any repository.
            operation_in_progress: Whether a merge/rebase/etc. is in progress
            head_ref: Ref HEAD points at, None for detached HEAD
            local_branches: Raw branch entries returned by list_local_branches()
            commits: Mapping of sha -> CommitInfo; unknown shas are unresolvable
            list_branches_error: If set, list_local_branches() raises
                RuntimeError with this message
            checkout_failure: If set, checkout_tree_and_set_head() fails with
                this reason and leaves HEAD unchanged
        """
        self._repository_roots = repository_roots if repository_roots is not None else {}
        self._operation_in_progress = operation_in_progress
        self._head_ref = head_ref
        self._local_branches = local_branches if local_branches is not None else []
        self._commits = commits if commits is not None else {}
        self._list_branches_error = list_branches_error
        self._checkout_failure = checkout_failure

        self._checkout_calls: list[tuple[Path, str, str]] = []

    def get_repository_root(self, cwd: Path) -> Path | None:
        return self._repository_roots.get(cwd)

    def is_operation_in_progress(self, repo_root: Path) -> bool:
        return self._operation_in_progress

    def get_head_ref(self, repo_root: Path) -> str | None:
        return self._head_ref

    def list_local_branches(self, repo_root: Path) -> list[LocalBranch]:
        if self._list_branches_error is not None:
            raise RuntimeError(self._list_branches_error)
        return list(self._local_branches)

    def resolve_commit(self, repo_root: Path, sha: str) -> CommitInfo | CommitNotFound:
        if sha not in self._commits:
            return CommitNotFound(sha=sha)
        return self._commits[sha]

    def checkout_tree_and_set_head(
        self, repo_root: Path, commit_sha: str, ref_name: str
    ) -> CheckedOut | CheckoutFailed:
        """Record the call and move HEAD unless configured to fail."""
        self._checkout_calls.append((repo_root, commit_sha, ref_name))
        if self._checkout_failure is not None:
            return CheckoutFailed(reason=self._checkout_failure)
        if commit_sha not in self._commits:
            return CheckoutFailed(reason=f"revspec '{commit_sha}' not found")
        self._head_ref = ref_name
        return CheckedOut(ref_name=ref_name)

    @property
    def checkout_calls(self) -> list[tuple[Path, str, str]]:
        """Get the list of checkout attempts.

        Returns list of (repo_root, commit_sha, ref_name) tuples.
        This property is for test assertions only.
        """
        return self._checkout_calls.copy()

    @property
    def head_ref(self) -> str | None:
        """Current HEAD ref, for test assertions."""
        return self._head_ref
