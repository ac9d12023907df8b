"""Textual application for interactive branch selection."""

from collections.abc import Sequence
from datetime import datetime

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.geometry import Region
from textual.widgets import Header, Label

from git_recent.core.branch_record import BranchRecord
from git_recent.tui.selection import SelectionEngine, SelectionInput, SelectionState
from git_recent.tui.widgets.branch_table import TABLE_HEADER_LINES, BranchTable

HELP_TEXT = "↑/↓ move   enter switch   q/esc quit"


class BranchScroll(VerticalScroll, can_focus=False):
    """Scroll container that never takes focus, so arrow keys reach the app."""


class BranchSelectApp(App[BranchRecord | None]):
    """Interactive table of recent branches.

    Key presses are forwarded to a SelectionEngine; the app exits with the
    engine's selected record once the user confirms or cancels.
    """

    BINDINGS = [
        Binding("down", "select_down", "Down", priority=True),
        Binding("up", "select_up", "Up", priority=True),
        Binding("enter", "confirm", "Switch", priority=True),
        Binding("q", "cancel", "Quit", priority=True),
        Binding("escape", "cancel", "Quit", show=False, priority=True),
    ]

    DEFAULT_CSS = """
    #help-line {
        dock: bottom;
        padding: 0 2;
        color: $text-muted;
    }
    """

    def __init__(self, records: Sequence[BranchRecord], now: datetime) -> None:
        """Initialize the selection app.

        Args:
            records: Ranked branch records to choose from
            now: Current time for relative timestamps
        """
        super().__init__()
        self._records = records
        self._now = now
        self._engine = SelectionEngine(records)
        self._table: BranchTable | None = None
        self._render_error: Exception | None = None

    @property
    def engine(self) -> SelectionEngine:
        return self._engine

    @property
    def render_error(self) -> Exception | None:
        """Error that ended the session while drawing, None otherwise."""
        return self._render_error

    TITLE = "git-recent"

    def compose(self) -> ComposeResult:
        """Create the application layout."""
        yield Header()
        with BranchScroll(id="branch-scroll"):
            yield BranchTable(self._records, self._now)
        yield Label(HELP_TEXT, id="help-line")

    def on_mount(self) -> None:
        self._table = self.query_one(BranchTable)
        self._render_selection()

    def action_select_down(self) -> None:
        self._apply(SelectionInput.DOWN)

    def action_select_up(self) -> None:
        self._apply(SelectionInput.UP)

    def action_confirm(self) -> None:
        self._apply(SelectionInput.ENTER)

    def action_cancel(self) -> None:
        self._apply(SelectionInput.QUIT)

    def _apply(self, selection_input: SelectionInput) -> None:
        state = self._engine.handle(selection_input)
        if state is SelectionState.NAVIGATING:
            self._render_selection()
            return
        self.exit(self._engine.selected_record())

    def _render_selection(self) -> None:
        """Redraw the table and keep the highlighted record in view."""
        if self._table is None:
            return
        try:
            self._table.show_cursor(self._engine.cursor_row)
        except Exception as e:
            # Reported by RealTuiRunner instead of Textual's traceback screen.
            self._render_error = e
            self.exit(None, return_code=1)
            return
        highlighted = self._engine.highlighted_record()
        if highlighted is not None:
            self.sub_title = highlighted.name
        self.call_after_refresh(self._scroll_to_cursor)

    def _scroll_to_cursor(self) -> None:
        cursor_row = self._engine.cursor_row
        if cursor_row is None:
            return
        scroll = self.query_one(BranchScroll)
        region = Region(
            0,
            self._table_top_margin() + TABLE_HEADER_LINES + cursor_row,
            scroll.size.width,
            self._engine.layout.rows_per_record,
        )
        scroll.scroll_to_region(region, animate=False)

    def _table_top_margin(self) -> int:
        if self._table is None:
            return 0
        return self._table.styles.margin.top
