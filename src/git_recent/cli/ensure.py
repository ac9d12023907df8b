"""CLI error handling helpers.

Ensure turns failed preconditions and non-ideal results into a single red
error line and exit code 1, so commands never show tracebacks to the user.
"""

from __future__ import annotations

from typing import NoReturn, TypeVar

from git_recent.non_ideal_state import NonIdealState
from git_recent.output import error_output

T = TypeVar("T")


class Ensure:
    """Helpers that exit the CLI with a user-friendly error."""

    @staticmethod
    def invariant(condition: bool, message: str) -> None:
        """Exit with an error unless condition holds.

        Args:
            condition: Precondition to check
            message: Explanation shown when the precondition fails

        Raises:
            SystemExit: If condition is False (with exit code 1)
        """
        if not condition:
            Ensure.fail(message)

    @staticmethod
    def ideal_state(result: T | NonIdealState) -> T:
        """Ensure result is not a NonIdealState, otherwise exit with error.

        This method provides type narrowing: it takes `T | NonIdealState` and
        returns `T`.

        Args:
            result: Value that may be a NonIdealState

        Returns:
            The value unchanged if not NonIdealState (with narrowed type T)

        Raises:
            SystemExit: If result is NonIdealState (with exit code 1)

        Example:
            >>> repo = Ensure.ideal_state(discover_repo(ctx.git, ctx.cwd))
            >>> # repo is now guaranteed to be RepoContext, not RepoNotFound
        """
        if isinstance(result, NonIdealState):
            Ensure.fail(result.message)
        return result

    @staticmethod
    def fail(message: str) -> NoReturn:
        """Print an error and exit with code 1."""
        error_output(message)
        raise SystemExit(1)
