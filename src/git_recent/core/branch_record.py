"""Branch records derived from repository state.

A BranchRecord is an immutable snapshot of one local branch and its tip
commit. Records are validated in a single pass: a branch either yields a
fully populated record or is skipped with a logged reason.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from git_recent.core.display import format_commit_date
from git_recent.gateway.git.abc import Git
from git_recent.gateway.git.types import CommitNotFound, LocalBranch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BranchRecord:
    """Snapshot of a local branch and its tip commit.

    Attributes:
        name: Short branch name, e.g. "feature/login"
        ref_name: Fully qualified ref, e.g. "refs/heads/feature/login"
        commit_sha: Object id of the tip commit
        time_seconds: Commit timestamp, seconds since the epoch
        offset_minutes: UTC offset the commit was recorded with
        summary: First line of the tip commit message
        author_name: Author of the tip commit
        is_current_branch: Whether HEAD points at ref_name
    """

    name: str
    ref_name: str
    commit_sha: str
    time_seconds: int
    offset_minutes: int
    summary: str
    author_name: str
    is_current_branch: bool

    def __str__(self) -> str:
        date = format_commit_date(self.time_seconds, self.offset_minutes)
        return f"Branch({self.name}, {self.commit_sha}, {self.summary}, {date})"


def _decode(value: bytes) -> str | None:
    """Decode UTF-8 text from git, None if it is not valid UTF-8."""
    try:
        return value.decode("utf-8")
    except UnicodeDecodeError:
        return None


def build_record(
    git: Git, repo_root: Path, branch: LocalBranch, current_ref: str | None
) -> BranchRecord | None:
    """Build a BranchRecord for one raw branch entry.

    Args:
        git: Git gateway used to resolve the tip commit
        repo_root: Path to the repository root
        branch: Raw branch entry from Git.list_local_branches()
        current_ref: Ref HEAD points at, None when detached

    Returns:
        A fully populated BranchRecord, or None if any field cannot be
        derived (the reason is logged)
    """
    name = _decode(branch.name)
    if not name:
        logger.warning("Skipping branch with undecodable name: %r", branch.name)
        return None

    ref_name = _decode(branch.ref_name)
    if not ref_name:
        logger.warning("Skipping branch '%s': reference name unavailable", name)
        return None

    if not branch.tip_sha:
        logger.warning("Skipping branch '%s': no tip commit", name)
        return None

    commit = git.resolve_commit(repo_root, branch.tip_sha)
    if isinstance(commit, CommitNotFound):
        logger.warning("Skipping branch '%s': %s", name, commit.message)
        return None

    summary = _decode(commit.summary)
    if not summary:
        logger.warning("Skipping branch '%s': tip commit has no summary", name)
        return None

    author_name = _decode(commit.author_name)
    if not author_name:
        logger.warning("Skipping branch '%s': author name unavailable", name)
        return None

    return BranchRecord(
        name=name,
        ref_name=ref_name,
        commit_sha=branch.tip_sha,
        time_seconds=commit.time_seconds,
        offset_minutes=commit.offset_minutes,
        summary=summary,
        author_name=author_name,
        is_current_branch=current_ref is not None and ref_name == current_ref,
    )


def collect_branch_records(git: Git, repo_root: Path) -> list[BranchRecord]:
    """Build records for every valid local branch.

    Malformed branches are skipped; they never abort the listing.

    Args:
        git: Git gateway
        repo_root: Path to the repository root

    Returns:
        Records in backend order (unranked)

    Raises:
        RuntimeError: If the branches cannot be enumerated at all
    """
    current_ref = git.get_head_ref(repo_root)
    records: list[BranchRecord] = []
    for branch in git.list_local_branches(repo_root):
        record = build_record(git, repo_root, branch, current_ref)
        if record is not None:
            logger.debug("Loaded %s", record)
            records.append(record)
    return records
