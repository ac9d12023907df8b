"""Fake Terminal implementation for testing."""

from git_recent.gateway.terminal.abc import Terminal


class FakeTerminal(Terminal):
    """Reports a fixed answer given at construction.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, is_interactive: bool) -> None:
        self._is_interactive = is_interactive

    def supports_interactive_session(self) -> bool:
        return self._is_interactive
