"""Terminal backed by the process's standard streams."""

import sys

from git_recent.gateway.terminal.abc import Terminal


class RealTerminal(Terminal):
    def supports_interactive_session(self) -> bool:
        return sys.stdin.isatty() and sys.stdout.isatty()
