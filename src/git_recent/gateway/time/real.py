"""Wall-clock implementation of Time."""

from datetime import UTC, datetime

from git_recent.gateway.time.abc import Time


class RealTime(Time):
    """Production implementation reading the system clock."""

    def now(self) -> datetime:
        return datetime.now(UTC)
