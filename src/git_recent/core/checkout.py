"""Turning a confirmed selection into a branch switch."""

import logging
from dataclasses import dataclass
from pathlib import Path

import click

from git_recent.constants import CHECKOUT_HINT, NOTHING_TO_DO_MESSAGE
from git_recent.core.branch_record import BranchRecord
from git_recent.gateway.git.abc import Git
from git_recent.gateway.git.types import CheckoutFailed
from git_recent.non_ideal_state import NonIdealState
from git_recent.output import user_output

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NothingToDo:
    """No branch was selected."""


@dataclass(frozen=True)
class AlreadyOnBranch:
    """The selected branch is already checked out."""

    name: str


@dataclass(frozen=True)
class SwitchedBranch:
    """The selected branch is now checked out."""

    name: str


@dataclass(frozen=True)
class SwitchFailed(NonIdealState):
    """Error: checkout was refused; the repository is unchanged."""

    name: str
    reason: str

    @property
    def error_type(self) -> str:
        return "switch-failed"

    @property
    def message(self) -> str:
        return f"Failed to checkout branch: {self.reason}"


SwitchOutcome = NothingToDo | AlreadyOnBranch | SwitchedBranch | SwitchFailed


def switch_to_selection(
    git: Git, repo_root: Path, selection: BranchRecord | None
) -> SwitchOutcome:
    """Check out the selected branch, reporting progress to the user.

    Selecting nothing or the branch HEAD already points at never touches the
    repository. Otherwise the checkout transaction runs exactly once.

    Args:
        git: Git gateway
        repo_root: Path to the repository root
        selection: Record confirmed in the selection table, None if the
            user cancelled

    Returns:
        The outcome of the switch
    """
    if selection is None:
        user_output(NOTHING_TO_DO_MESSAGE)
        return NothingToDo()

    if selection.is_current_branch:
        user_output(f"Already on '{selection.name}'")
        return AlreadyOnBranch(name=selection.name)

    user_output(f"Switching to branch '{selection.name}'")
    result = git.checkout_tree_and_set_head(repo_root, selection.commit_sha, selection.ref_name)
    if isinstance(result, CheckoutFailed):
        logger.debug("Checkout of %s refused: %s", selection.ref_name, result.reason)
        failure = SwitchFailed(name=selection.name, reason=result.reason)
        user_output(click.style(failure.message, fg="red"))
        user_output(CHECKOUT_HINT)
        return failure

    user_output(f"Switched to branch '{selection.name}'")
    return SwitchedBranch(name=selection.name)
