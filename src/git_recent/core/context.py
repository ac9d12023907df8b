"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from git_recent.gateway.git.abc import Git
from git_recent.gateway.git.real import RealGit
from git_recent.gateway.terminal.abc import Terminal
from git_recent.gateway.terminal.real import RealTerminal
from git_recent.gateway.time.abc import Time
from git_recent.gateway.time.real import RealTime
from git_recent.tui.runner import RealTuiRunner, TuiRunner


@dataclass(frozen=True)
class RecentContext:
    """Immutable context holding all dependencies for a git-recent run.

    Created at the CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    terminal: Terminal
    time: Time
    tui_runner: TuiRunner
    cwd: Path  # Current working directory at CLI invocation

    @staticmethod
    def for_test(
        *,
        git: Git | None = None,
        terminal: Terminal | None = None,
        time: Time | None = None,
        tui_runner: TuiRunner | None = None,
        cwd: Path | None = None,
    ) -> "RecentContext":
        """Create a context wired with fakes.

        Args:
            git: Optional Git gateway. If None, creates an empty FakeGit.
            terminal: Optional Terminal. If None, reports an interactive TTY.
            time: Optional Time. If None, uses FakeTime's default instant.
            tui_runner: Optional TuiRunner. If None, uses a FakeTuiRunner
                that cancels immediately.
            cwd: Optional working directory. If None, defaults to
                Path("/test/default/cwd") to prevent accidental use of the
                real Path.cwd() in tests.

        Returns:
            RecentContext for tests
        """
        from git_recent.gateway.git.fake import FakeGit
        from git_recent.gateway.terminal.fake import FakeTerminal
        from git_recent.gateway.time.fake import FakeTime
        from git_recent.tui.runner import FakeTuiRunner

        return RecentContext(
            git=git if git is not None else FakeGit(),
            terminal=terminal if terminal is not None else FakeTerminal(is_interactive=True),
            time=time if time is not None else FakeTime(),
            tui_runner=tui_runner if tui_runner is not None else FakeTuiRunner(keys=["q"]),
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
        )


def create_context() -> RecentContext:
    """Create the production context for the current working directory."""
    return RecentContext(
        git=RealGit(),
        terminal=RealTerminal(),
        time=RealTime(),
        tui_runner=RealTuiRunner(),
        cwd=Path.cwd(),
    )
