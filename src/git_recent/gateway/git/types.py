"""Data and discriminated union types for the git gateway.

CheckedOut | CheckoutFailed and CommitInfo | CommitNotFound follow the
NonIdealState pattern: operational failures are returned, not raised.
"""

from dataclasses import dataclass

from git_recent.non_ideal_state import NonIdealState


@dataclass(frozen=True)
class LocalBranch:
    """Raw local branch entry as listed by git.

    Names are kept as undecoded bytes; decoding (and skipping branches that
    cannot be decoded) happens when a BranchRecord is built.

    Attributes:
        name: Short branch name, e.g. b"main"
        ref_name: Fully qualified ref, e.g. b"refs/heads/main"
        tip_sha: Object id the branch points at
    """

    name: bytes
    ref_name: bytes
    tip_sha: str


@dataclass(frozen=True)
class CommitInfo:
    """Metadata of a single commit.

    Attributes:
        time_seconds: Commit timestamp, seconds since the epoch
        offset_minutes: UTC offset the commit was recorded with
        summary: First line of the commit message, undecoded
        author_name: Author display name, undecoded
    """

    time_seconds: int
    offset_minutes: int
    summary: bytes
    author_name: bytes


@dataclass(frozen=True)
class CommitNotFound(NonIdealState):
    """Error: an object id does not resolve to a commit."""

    sha: str

    @property
    def error_type(self) -> str:
        return "commit-not-found"

    @property
    def message(self) -> str:
        return f"Cannot resolve {self.sha} to a commit"


@dataclass(frozen=True)
class CheckedOut:
    """Success result from the checkout transaction."""

    ref_name: str


@dataclass(frozen=True)
class CheckoutFailed(NonIdealState):
    """Error: the checkout transaction did not complete.

    HEAD and the working tree are left as they were before the attempt.
    """

    reason: str

    @property
    def error_type(self) -> str:
        return "checkout-failed"

    @property
    def message(self) -> str:
        return self.reason
