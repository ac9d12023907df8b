"""Tests for TuiRunner implementations."""

from datetime import UTC, datetime

import pytest

from git_recent.tui.app import BranchSelectApp
from git_recent.tui.runner import FakeTuiRunner, RealTuiRunner, TerminalSessionFailed
from git_recent.tui.widgets.branch_table import BranchTable
from tests.test_utils.branch_builders import make_record

NOW = datetime(2024, 1, 15, 12, 0, tzinfo=UTC)


def _app() -> BranchSelectApp:
    return BranchSelectApp([make_record("main", 300), make_record("feature", 200)], now=NOW)


def test_apps_run_starts_empty() -> None:
    runner = FakeTuiRunner()
    assert runner.apps_run == []


def test_run_captures_app_and_replays_keys() -> None:
    runner = FakeTuiRunner(keys=["down", "enter"])
    app = _app()

    selection = runner.run(app)

    assert runner.apps_run == [app]
    assert selection is not None
    assert not isinstance(selection, TerminalSessionFailed)
    assert selection.name == "feature"


def test_run_returns_none_on_quit() -> None:
    runner = FakeTuiRunner(keys=["down", "q"])

    assert runner.run(_app()) is None


def test_unknown_keys_are_ignored() -> None:
    runner = FakeTuiRunner(keys=["x", "down", "tab", "enter"])

    selection = runner.run(_app())

    assert selection is not None
    assert not isinstance(selection, TerminalSessionFailed)
    assert selection.name == "feature"


def test_failure_reports_terminal_session_failed() -> None:
    runner = FakeTuiRunner(failure="no terminal")

    result = runner.run(_app())

    assert result == TerminalSessionFailed(reason="no terminal")
    assert isinstance(result, TerminalSessionFailed)
    assert result.message == "error rendering branch selection: no terminal"


def test_exhausted_keys_raise() -> None:
    runner = FakeTuiRunner(keys=["down"])

    with pytest.raises(RuntimeError, match="did not finish"):
        runner.run(_app())


def test_run_does_not_start_event_loop() -> None:
    """run() returns without blocking; app.run() would hang without a terminal."""
    runner = FakeTuiRunner(keys=["enter"])
    app = _app()

    runner.run(app)

    assert app.return_value is None


def _failing_build_table(self: BranchTable, cursor_row: int | None) -> None:
    raise ValueError("draw failed")


def test_real_runner_reports_draw_failure_without_traceback(
    monkeypatch: pytest.MonkeyPatch, capfd: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(BranchTable, "build_table", _failing_build_table)
    app = _app()

    result = RealTuiRunner(headless=True).run(app)

    assert result == TerminalSessionFailed(reason="draw failed")
    assert isinstance(app.render_error, ValueError)
    captured = capfd.readouterr()
    assert "Traceback" not in captured.out
    assert "Traceback" not in captured.err
