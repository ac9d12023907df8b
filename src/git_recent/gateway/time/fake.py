"""Fake Time implementation for testing."""

from datetime import UTC, datetime

from git_recent.gateway.time.abc import Time


class FakeTime(Time):
    """Frozen clock.

    Usage:
        time = FakeTime(datetime(2024, 1, 15, 12, 0, tzinfo=UTC))
        assert time.now() == datetime(2024, 1, 15, 12, 0, tzinfo=UTC)
    """

    def __init__(self, current_time: datetime | None = None) -> None:
        """Create FakeTime.

        Args:
            current_time: Time returned by now(). Defaults to
                2024-01-15 12:00:00 UTC.
        """
        self._current_time = (
            current_time if current_time is not None else datetime(2024, 1, 15, 12, 0, tzinfo=UTC)
        )

    def now(self) -> datetime:
        return self._current_time

