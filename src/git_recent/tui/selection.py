"""Selection state machine behind the interactive branch table.

The engine is independent of Textual: it only knows about input events and
the visual row layout, which keeps navigation testable without a terminal.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from git_recent.constants import ROWS_PER_RECORD
from git_recent.core.branch_record import BranchRecord


class SelectionState(Enum):
    """States of the selection loop. CONFIRMED and CANCELLED are terminal."""

    NAVIGATING = "navigating"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class SelectionInput(Enum):
    """Input events the engine reacts to."""

    DOWN = "down"
    UP = "up"
    ENTER = "enter"
    QUIT = "quit"


KEY_INPUTS: dict[str, SelectionInput] = {
    "down": SelectionInput.DOWN,
    "up": SelectionInput.UP,
    "enter": SelectionInput.ENTER,
    "q": SelectionInput.QUIT,
    "escape": SelectionInput.QUIT,
}


def input_for_key(key: str) -> SelectionInput | None:
    """Map a Textual key name to an input event, None for ignored keys."""
    return KEY_INPUTS.get(key)


@dataclass(frozen=True)
class RowLayout:
    """Mapping between visual table rows and record indices.

    Each record occupies ``rows_per_record`` consecutive rows; the first one
    (the header row) is where the cursor rests.
    """

    record_count: int
    rows_per_record: int = ROWS_PER_RECORD

    @property
    def last_header_row(self) -> int | None:
        """Header row of the last record, None when there are no records."""
        if self.record_count == 0:
            return None
        return self.header_row(self.record_count - 1)

    def header_row(self, record_index: int) -> int:
        return record_index * self.rows_per_record

    def record_index(self, row: int) -> int:
        return row // self.rows_per_record


class SelectionEngine:
    """Cursor and confirmation state over a ranked list of branch records.

    The engine owns the cursor; the record list is only borrowed. The cursor
    always sits on a header row and never wraps around.
    """

    def __init__(self, records: Sequence[BranchRecord]) -> None:
        """Start navigating with the cursor on the first record.

        Args:
            records: Ranked records to choose from; may be empty, in which
                case there is no cursor
        """
        self._records = records
        self._layout = RowLayout(record_count=len(records))
        self._cursor_row: int | None = 0 if records else None
        self._state = SelectionState.NAVIGATING

    @property
    def records(self) -> Sequence[BranchRecord]:
        return self._records

    @property
    def layout(self) -> RowLayout:
        return self._layout

    @property
    def cursor_row(self) -> int | None:
        return self._cursor_row

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def is_finished(self) -> bool:
        return self._state is not SelectionState.NAVIGATING

    def handle(self, event: SelectionInput | None) -> SelectionState:
        """Apply one input event.

        Events after a terminal state and unknown events (None) are ignored.

        Args:
            event: Input to apply

        Returns:
            State after the event
        """
        if self.is_finished or event is None:
            return self._state

        if event is SelectionInput.DOWN:
            self._move_down()
        elif event is SelectionInput.UP:
            self._move_up()
        elif event is SelectionInput.ENTER:
            self._confirm()
        elif event is SelectionInput.QUIT:
            self._state = SelectionState.CANCELLED
        return self._state

    def _move_down(self) -> None:
        last_header_row = self._layout.last_header_row
        if self._cursor_row is None or last_header_row is None:
            return
        next_row = self._cursor_row + self._layout.rows_per_record
        if next_row <= last_header_row:
            self._cursor_row = next_row

    def _move_up(self) -> None:
        if self._cursor_row is None:
            return
        if self._cursor_row >= self._layout.rows_per_record:
            self._cursor_row -= self._layout.rows_per_record

    def _confirm(self) -> None:
        # Nothing to confirm in an empty table
        if self._cursor_row is None:
            self._state = SelectionState.CANCELLED
            return
        self._state = SelectionState.CONFIRMED

    def selected_record(self) -> BranchRecord | None:
        """Record chosen by the user, None unless the selection was confirmed."""
        if self._state is not SelectionState.CONFIRMED or self._cursor_row is None:
            return None
        return self._records[self._layout.record_index(self._cursor_row)]

    def highlighted_record(self) -> BranchRecord | None:
        """Record under the cursor while navigating."""
        if self._cursor_row is None:
            return None
        return self._records[self._layout.record_index(self._cursor_row)]
