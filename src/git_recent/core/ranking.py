"""Ranking of branch records by recency."""

from collections.abc import Iterable

from git_recent.constants import MAX_BRANCHES
from git_recent.core.branch_record import BranchRecord


def rank_branch_records(
    records: Iterable[BranchRecord], *, limit: int = MAX_BRANCHES
) -> list[BranchRecord]:
    """Order records newest first and keep the most recent ones.

    Sorting is stable, so branches committed at the same second keep their
    listing order. Truncation happens after sorting.

    Args:
        records: Valid branch records in any order
        limit: Maximum number of records to keep

    Returns:
        At most ``limit`` records sorted by time_seconds descending
    """
    ranked = sorted(records, key=lambda record: record.time_seconds, reverse=True)
    return ranked[:limit]
