"""Branch table widget for the selection screen."""

from collections.abc import Sequence
from datetime import datetime

from rich import box
from rich.table import Table
from rich.text import Text
from textual.widgets import Static

from git_recent.constants import HIGHLIGHT_SYMBOL, TABLE_TITLE
from git_recent.core.branch_record import BranchRecord
from git_recent.core.display import commit_line, display_name

SELECTED_STYLE = "bold yellow"
NORMAL_STYLE = "white"

# Lines the rich table draws above its first data row: title, top border,
# column header and header separator
TABLE_HEADER_LINES = 4


def record_rows(record: BranchRecord, now: datetime) -> tuple[tuple[str, str], ...]:
    """Visual rows for one record: header, commit summary, blank separator.

    Args:
        record: Branch record to display
        now: Current time for relative timestamps

    Returns:
        One (name cell, commit cell) pair per visual row
    """
    return (
        (display_name(record), commit_line(record, now)),
        ("", record.summary),
        ("", ""),
    )


class BranchTable(Static):
    """Static widget rendering branch records as a rich table.

    The widget holds no cursor state of its own; it renders whatever cursor
    row it is given.
    """

    DEFAULT_CSS = """
    BranchTable {
        margin: 1 2;
    }
    """

    def __init__(self, records: Sequence[BranchRecord], now: datetime) -> None:
        """Initialize the table.

        Args:
            records: Ranked branch records to show
            now: Current time for relative timestamps
        """
        super().__init__()
        self._rows: list[tuple[str, str]] = []
        for record in records:
            self._rows.extend(record_rows(record, now))

    @property
    def rows(self) -> list[tuple[str, str]]:
        """Visual rows in display order, for tests."""
        return list(self._rows)

    def show_cursor(self, cursor_row: int | None) -> None:
        """Re-render with the given row highlighted."""
        self.update(self.build_table(cursor_row))

    def build_table(self, cursor_row: int | None) -> Table:
        """Build the rich table for the current cursor position.

        Args:
            cursor_row: Visual row to highlight, None for no highlight

        Returns:
            Renderable rich Table
        """
        table = Table(
            title=TABLE_TITLE,
            box=box.SQUARE,
            expand=True,
            show_edge=True,
        )
        table.add_column("Name", ratio=1, no_wrap=True)
        table.add_column("Last Commit", ratio=4, no_wrap=True)

        padding = " " * len(HIGHLIGHT_SYMBOL)
        for row_index, (name_cell, commit_cell) in enumerate(self._rows):
            if row_index == cursor_row:
                table.add_row(
                    Text(HIGHLIGHT_SYMBOL + name_cell),
                    Text(commit_cell),
                    style=SELECTED_STYLE,
                )
            else:
                table.add_row(
                    Text(padding + name_cell),
                    Text(commit_cell),
                    style=NORMAL_STYLE,
                )
        return table
