"""Presentation helpers for branch records.

Everything here derives display strings from a BranchRecord; the record
itself is never modified.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone
from typing import TYPE_CHECKING

from git_recent.constants import CURRENT_BRANCH_MARKER, SHORT_SHA_LENGTH

if TYPE_CHECKING:
    from git_recent.core.branch_record import BranchRecord

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_WEEK = 7 * _DAY
_MONTH = 30 * _DAY
_YEAR = 365 * _DAY


def commit_datetime(time_seconds: int, offset_minutes: int) -> datetime:
    """Rebuild a commit timestamp in the timezone it was recorded in.

    Args:
        time_seconds: Seconds since the epoch
        offset_minutes: UTC offset of the committer, e.g. 120 for +0200

    Returns:
        Timezone-aware datetime carrying the original offset
    """
    tz = timezone(timedelta(minutes=offset_minutes))
    return datetime.fromtimestamp(time_seconds, tz=UTC).astimezone(tz)


def format_commit_date(time_seconds: int, offset_minutes: int) -> str:
    """Format a commit timestamp as local date, e.g. '2024-01-15 13:00 +0100'."""
    return commit_datetime(time_seconds, offset_minutes).strftime("%Y-%m-%d %H:%M %z")


def _describe_span(seconds: int) -> str:
    if seconds < 2 * _MINUTE:
        return "a minute"
    if seconds < _HOUR:
        return f"{seconds // _MINUTE} minutes"
    if seconds < 2 * _HOUR:
        return "an hour"
    if seconds < _DAY:
        return f"{seconds // _HOUR} hours"
    if seconds < 2 * _DAY:
        return "a day"
    if seconds < _WEEK:
        return f"{seconds // _DAY} days"
    if seconds < 2 * _WEEK:
        return "a week"
    if seconds < _MONTH:
        return f"{seconds // _WEEK} weeks"
    if seconds < 2 * _MONTH:
        return "a month"
    if seconds < _YEAR:
        return f"{seconds // _MONTH} months"
    if seconds < 2 * _YEAR:
        return "a year"
    return f"{seconds // _YEAR} years"


def format_relative_time(then: datetime, now: datetime) -> str:
    """Describe how long ago ``then`` was, e.g. "3 hours ago".

    Timestamps less than 45 seconds away read "now"; timestamps in the
    future read "in 2 days".

    Args:
        then: Timezone-aware time to describe
        now: Timezone-aware current time

    Returns:
        Human-relative description
    """
    delta = int((now - then).total_seconds())
    if abs(delta) < 45:
        return "now"
    if delta < 0:
        return f"in {_describe_span(-delta)}"
    return f"{_describe_span(delta)} ago"


def relative_commit_time(record: BranchRecord, now: datetime) -> str:
    """Relative age of the record's tip commit."""
    return format_relative_time(commit_datetime(record.time_seconds, record.offset_minutes), now)


def display_name(record: BranchRecord) -> str:
    """Branch name as shown in the table; the current branch is marked."""
    if record.is_current_branch:
        return CURRENT_BRANCH_MARKER + record.name
    return record.name


def commit_line(record: BranchRecord, now: datetime) -> str:
    """One-line commit description: short sha, relative time and author.

    Example: "1a2b3c4d (3 hours ago) Jane Doe"
    """
    short_sha = record.commit_sha[:SHORT_SHA_LENGTH]
    return f"{short_sha} ({relative_commit_time(record, now)}) {record.author_name}"
