"""Abstract git gateway used by git-recent.

This module is the narrow query/mutate interface over the version-control
backend. Nothing else in the package talks to git directly.

Implementations:
- RealGit: Production implementation shelling out to the git executable
- FakeGit: In-memory implementation for tests
"""

from abc import ABC, abstractmethod
from pathlib import Path

from git_recent.gateway.git.types import (
    CheckedOut,
    CheckoutFailed,
    CommitInfo,
    CommitNotFound,
    LocalBranch,
)


class Git(ABC):
    """Abstract interface for the git operations git-recent needs."""

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def get_repository_root(self, cwd: Path) -> Path | None:
        """Discover the repository containing cwd.

        Args:
            cwd: Directory to start discovery from

        Returns:
            Absolute path of the working tree root, or None if cwd is not
            inside a git repository
        """
        ...

    @abstractmethod
    def is_operation_in_progress(self, repo_root: Path) -> bool:
        """Check whether a merge, rebase, cherry-pick, revert, bisect or
        mailbox apply is in progress.

        Args:
            repo_root: Path to the repository root

        Returns:
            True if the repository is not in a clean state
        """
        ...

    @abstractmethod
    def get_head_ref(self, repo_root: Path) -> str | None:
        """Get the fully qualified ref HEAD points at.

        Args:
            repo_root: Path to the repository root

        Returns:
            Ref name such as "refs/heads/main", or None when HEAD is detached
            or cannot be resolved
        """
        ...

    @abstractmethod
    def list_local_branches(self, repo_root: Path) -> list[LocalBranch]:
        """List all local branches with their tip commits.

        Args:
            repo_root: Path to the repository root

        Returns:
            Raw branch entries in backend order

        Raises:
            RuntimeError: If branches cannot be enumerated at all
        """
        ...

    @abstractmethod
    def resolve_commit(self, repo_root: Path, sha: str) -> CommitInfo | CommitNotFound:
        """Read the metadata of a commit.

        Args:
            repo_root: Path to the repository root
            sha: Object id to resolve

        Returns:
            CommitInfo, or CommitNotFound if sha is not a readable commit
        """
        ...

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    @abstractmethod
    def checkout_tree_and_set_head(
        self, repo_root: Path, commit_sha: str, ref_name: str
    ) -> CheckedOut | CheckoutFailed:
        """Apply a commit's tree to the working directory and point HEAD at a ref.

        The tree is applied first; HEAD is only updated once the working tree
        step succeeded, so a refused checkout leaves HEAD unchanged.

        Args:
            repo_root: Path to the repository root
            commit_sha: Commit whose tree is checked out
            ref_name: Fully qualified ref HEAD will point at

        Returns:
            CheckedOut on success, CheckoutFailed with git's reason otherwise
        """
        ...
