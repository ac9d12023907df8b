"""Production implementation of the git gateway using subprocess."""

import logging
from pathlib import Path

from git_recent.gateway.git.abc import Git
from git_recent.gateway.git.types import (
    CheckedOut,
    CheckoutFailed,
    CommitInfo,
    CommitNotFound,
    LocalBranch,
)
from git_recent.subprocess_utils import run_subprocess_with_context

logger = logging.getLogger(__name__)

# Files or directories git leaves in the git dir while an operation is paused
IN_PROGRESS_MARKERS = (
    "MERGE_HEAD",
    "CHERRY_PICK_HEAD",
    "REVERT_HEAD",
    "BISECT_LOG",
    "rebase-merge",
    "rebase-apply",
)

BRANCH_FORMAT = "%(refname)%00%(refname:lstrip=2)%00%(objectname)"
COMMIT_FORMAT = "%cd%x00%an%x00%s"


def _parse_raw_date(raw: str) -> tuple[int, int]:
    """Parse git's raw date format into (seconds, offset minutes).

    Args:
        raw: Date as printed by --date=raw, e.g. "1700000000 +0130"

    Returns:
        Tuple of seconds since the epoch and signed UTC offset in minutes

    Raises:
        ValueError: If the value is not in raw date format
    """
    seconds_str, offset_str = raw.split()
    if len(offset_str) != 5 or offset_str[0] not in "+-" or not offset_str[1:].isdigit():
        raise ValueError(f"Unexpected timezone offset: {offset_str!r}")
    sign = -1 if offset_str[0] == "-" else 1
    offset_minutes = sign * (int(offset_str[1:3]) * 60 + int(offset_str[3:5]))
    return int(seconds_str), offset_minutes


class RealGit(Git):
    """Production implementation of the git gateway.

    All operations execute the git executable via subprocess.
    """

    # ============================================================================
    # Query Operations
    # ============================================================================

    def get_repository_root(self, cwd: Path) -> Path | None:
        """Discover the repository containing cwd."""
        result = run_subprocess_with_context(
            cmd=["git", "rev-parse", "--show-toplevel"],
            operation_context="discover repository",
            cwd=cwd,
            check=False,
        )
        if result.returncode != 0:
            return None
        return Path(result.stdout.strip())

    def is_operation_in_progress(self, repo_root: Path) -> bool:
        """Look for merge/rebase/cherry-pick/revert/bisect state in the git dir."""
        result = run_subprocess_with_context(
            cmd=["git", "rev-parse", "--absolute-git-dir"],
            operation_context="locate git directory",
            cwd=repo_root,
        )
        git_dir = Path(result.stdout.strip())
        for marker in IN_PROGRESS_MARKERS:
            if (git_dir / marker).exists():
                logger.debug("Found %s in %s", marker, git_dir)
                return True
        return False

    def get_head_ref(self, repo_root: Path) -> str | None:
        """Get the ref HEAD points at, None when detached."""
        result = run_subprocess_with_context(
            cmd=["git", "symbolic-ref", "-q", "HEAD"],
            operation_context="read HEAD",
            cwd=repo_root,
            check=False,
        )
        if result.returncode != 0:
            return None
        ref_name = result.stdout.strip()
        if not ref_name:
            return None
        return ref_name

    def list_local_branches(self, repo_root: Path) -> list[LocalBranch]:
        """List local branches as raw, undecoded entries."""
        result = run_subprocess_with_context(
            cmd=["git", "for-each-ref", f"--format={BRANCH_FORMAT}", "refs/heads"],
            operation_context="list local branches",
            cwd=repo_root,
            text=False,
        )
        branches: list[LocalBranch] = []
        for line in result.stdout.split(b"\n"):
            if not line:
                continue
            fields = line.split(b"\0")
            if len(fields) != 3:
                logger.warning("Ignoring malformed branch listing line: %r", line)
                continue
            ref_name, name, objectname = fields
            branches.append(
                LocalBranch(
                    name=name,
                    ref_name=ref_name,
                    tip_sha=objectname.decode("ascii", errors="replace").strip(),
                )
            )
        return branches

    def resolve_commit(self, repo_root: Path, sha: str) -> CommitInfo | CommitNotFound:
        """Read committer date, author name and summary of a commit."""
        result = run_subprocess_with_context(
            cmd=[
                "git",
                "show",
                "-s",
                "--date=raw",
                f"--format={COMMIT_FORMAT}",
                f"{sha}^{{commit}}",
            ],
            operation_context=f"read commit {sha}",
            cwd=repo_root,
            check=False,
            text=False,
        )
        if result.returncode != 0:
            return CommitNotFound(sha=sha)

        fields = result.stdout.rstrip(b"\n").split(b"\0")
        if len(fields) != 3:
            return CommitNotFound(sha=sha)
        raw_date, author_name, summary = fields

        try:
            time_seconds, offset_minutes = _parse_raw_date(raw_date.decode("ascii"))
        except (UnicodeDecodeError, ValueError) as e:
            logger.debug("Unparseable date for %s: %s", sha, e)
            return CommitNotFound(sha=sha)

        return CommitInfo(
            time_seconds=time_seconds,
            offset_minutes=offset_minutes,
            summary=summary,
            author_name=author_name,
        )

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    def checkout_tree_and_set_head(
        self, repo_root: Path, commit_sha: str, ref_name: str
    ) -> CheckedOut | CheckoutFailed:
        """Update the working tree with read-tree, then repoint HEAD."""
        verify = run_subprocess_with_context(
            cmd=["git", "rev-parse", "--verify", "--quiet", f"{commit_sha}^{{commit}}"],
            operation_context=f"resolve revision {commit_sha}",
            cwd=repo_root,
            check=False,
        )
        if verify.returncode != 0:
            return CheckoutFailed(reason=f"revspec '{commit_sha}' not found")
        target = verify.stdout.strip()

        # Stat-only changes (touch, editor re-save) must not read as local edits.
        run_subprocess_with_context(
            cmd=["git", "update-index", "-q", "--refresh"],
            operation_context="refresh index",
            cwd=repo_root,
            check=False,
        )

        # Two-way merge from HEAD: refuses to overwrite local modifications
        # and leaves HEAD alone when it does.
        tree = run_subprocess_with_context(
            cmd=["git", "read-tree", "-m", "-u", "HEAD", target],
            operation_context=f"check out tree of {target}",
            cwd=repo_root,
            check=False,
        )
        if tree.returncode != 0:
            return CheckoutFailed(reason=_first_error_line(tree.stderr, "checkout conflict"))

        head = run_subprocess_with_context(
            cmd=[
                "git",
                "symbolic-ref",
                "-m",
                f"git-recent: moving to {ref_name}",
                "HEAD",
                ref_name,
            ],
            operation_context=f"point HEAD at {ref_name}",
            cwd=repo_root,
            check=False,
        )
        if head.returncode != 0:
            return CheckoutFailed(reason=_first_error_line(head.stderr, "cannot update HEAD"))

        return CheckedOut(ref_name=ref_name)


def _first_error_line(stderr: str | None, fallback: str) -> str:
    """Pick the first meaningful line of git's stderr."""
    if stderr:
        for line in stderr.splitlines():
            line = line.strip()
            if line:
                return line.removeprefix("error: ").removeprefix("fatal: ")
    return fallback
