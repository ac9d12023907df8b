"""Terminal capability checks.

The branch table reads keys from stdin and draws on stdout, so both must be
attached to a TTY before the session starts.
"""

from abc import ABC, abstractmethod


class Terminal(ABC):
    """Answers whether an interactive selection session can run here."""

    @abstractmethod
    def supports_interactive_session(self) -> bool:
        """True when stdin and stdout are both attached to a TTY."""
        ...
