import logging

import click

from git_recent.cli.ensure import Ensure
from git_recent.constants import NOT_CLEAN_MESSAGE, NOTHING_TO_DO_MESSAGE
from git_recent.core.branch_record import collect_branch_records
from git_recent.core.checkout import SwitchFailed, switch_to_selection
from git_recent.core.context import RecentContext, create_context
from git_recent.core.ranking import rank_branch_records
from git_recent.core.repo_discovery import discover_repo
from git_recent.output import user_output
from git_recent.tui.app import BranchSelectApp

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def switch_recent_branch(ctx: RecentContext) -> None:
    """List recent branches, let the user pick one and check it out.

    Args:
        ctx: Application context

    Raises:
        SystemExit: With code 1 when the repository is not clean, the
            terminal session fails, or the checkout is refused
        RuntimeError: If git fails in a way that cannot be reported as a
            non-ideal state (handled by the CLI entry point)
    """
    repo = Ensure.ideal_state(discover_repo(ctx.git, ctx.cwd))

    if ctx.git.is_operation_in_progress(repo.root):
        user_output(NOT_CLEAN_MESSAGE)
        raise SystemExit(1)

    records = rank_branch_records(collect_branch_records(ctx.git, repo.root))
    logger.debug("Showing %d branches from %s", len(records), repo.root)
    if not records:
        user_output(NOTHING_TO_DO_MESSAGE)
        return

    Ensure.invariant(
        ctx.terminal.supports_interactive_session(),
        "git-recent requires an interactive terminal",
    )

    app = BranchSelectApp(records, now=ctx.time.now())
    selection = Ensure.ideal_state(ctx.tui_runner.run(app))

    outcome = switch_to_selection(ctx.git, repo.root, selection)
    if isinstance(outcome, SwitchFailed):
        raise SystemExit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="git-recent")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Switch to one of your most recently committed local branches.

    Branches are listed newest first. Use the arrow keys to move, enter to
    check out the highlighted branch and q or escape to leave without
    switching.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()

    try:
        switch_recent_branch(ctx.obj)
    except RuntimeError as e:
        logger.debug("git-recent failed", exc_info=True)
        Ensure.fail(str(e))
