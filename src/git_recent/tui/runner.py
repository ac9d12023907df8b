"""TUI runner abstraction for testability.

This module provides an ABC for running the branch selection app, enabling
CLI tests without starting the Textual event loop.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from git_recent.non_ideal_state import NonIdealState
from git_recent.tui.selection import input_for_key

if TYPE_CHECKING:
    from git_recent.core.branch_record import BranchRecord
    from git_recent.tui.app import BranchSelectApp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TerminalSessionFailed(NonIdealState):
    """Error: the terminal session could not be started or rendering failed."""

    reason: str

    @property
    def error_type(self) -> str:
        return "terminal-session-failed"

    @property
    def message(self) -> str:
        return f"error rendering branch selection: {self.reason}"


class TuiRunner(ABC):
    """Abstract interface for running the branch selection app."""

    @abstractmethod
    def run(self, app: BranchSelectApp) -> BranchRecord | None | TerminalSessionFailed:
        """Run the app until the user confirms or cancels.

        Args:
            app: The BranchSelectApp instance to run

        Returns:
            The confirmed record, None if cancelled, or TerminalSessionFailed
        """
        ...


class RealTuiRunner(TuiRunner):
    """Production implementation that runs the Textual event loop.

    Textual puts the terminal in raw mode and switches to the alternate screen
    for the duration of App.run(), and restores it on every exit path.
    """

    def __init__(self, *, headless: bool = False) -> None:
        """Create RealTuiRunner.

        Args:
            headless: Run without touching the terminal (used by tests)
        """
        self._headless = headless

    def run(self, app: BranchSelectApp) -> BranchRecord | None | TerminalSessionFailed:
        try:
            selection = app.run(headless=self._headless)
        except Exception as e:
            logger.debug("Terminal session failed", exc_info=True)
            return TerminalSessionFailed(reason=_describe(e))

        if app.render_error is not None:
            logger.debug("Rendering failed", exc_info=app.render_error)
            return TerminalSessionFailed(reason=_describe(app.render_error))
        if app.return_code not in (None, 0):
            return TerminalSessionFailed(reason=f"terminal exited with code {app.return_code}")
        return selection


class FakeTuiRunner(TuiRunner):
    """Test implementation that replays scripted keys without a terminal.

    Keys are fed to the app's SelectionEngine one by one, exactly as the
    Textual bindings would, until the engine reaches a terminal state.
    """

    def __init__(self, *, keys: list[str] | None = None, failure: str | None = None) -> None:
        """Create FakeTuiRunner.

        Args:
            keys: Textual key names to replay, e.g. ["down", "enter"]
            failure: If set, run() reports TerminalSessionFailed with this reason
        """
        self._keys = keys if keys is not None else []
        self._failure = failure
        self._apps_run: list[BranchSelectApp] = []

    def run(self, app: BranchSelectApp) -> BranchRecord | None | TerminalSessionFailed:
        self._apps_run.append(app)
        if self._failure is not None:
            return TerminalSessionFailed(reason=self._failure)

        for key in self._keys:
            app.engine.handle(input_for_key(key))
            if app.engine.is_finished:
                return app.engine.selected_record()

        raise RuntimeError(f"Scripted keys {self._keys} did not finish the selection")

    @property
    def apps_run(self) -> list[BranchSelectApp]:
        """Get the list of apps that were passed to run().

        This property is for test assertions only.
        """
        return list(self._apps_run)


def _describe(error: Exception) -> str:
    return str(error) or type(error).__name__
