"""Subprocess helpers that attach an operation context to failures."""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


def run_subprocess_with_context(
    *,
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path,
    check: bool = True,
    text: bool = True,
) -> subprocess.CompletedProcess:
    """Run a command, capturing output, and explain failures.

    Args:
        cmd: Command and arguments to execute
        operation_context: What the command is for, e.g. "list local branches"
        cwd: Working directory for the command
        check: Raise on non-zero exit when True
        text: Decode output as text when True, keep raw bytes otherwise

    Returns:
        The completed process

    Raises:
        RuntimeError: If check is True and the command fails, or the
            executable cannot be found
    """
    logger.debug("Running %s (%s) in %s", " ".join(cmd), operation_context, cwd)
    try:
        return subprocess.run(
            list(cmd),
            cwd=cwd,
            capture_output=True,
            text=text,
            check=check,
        )
    except subprocess.CalledProcessError as e:
        stderr = e.stderr
        if isinstance(stderr, bytes):
            stderr = stderr.decode("utf-8", errors="replace")
        detail = stderr.strip() if stderr else f"exit code {e.returncode}"
        raise RuntimeError(f"Failed to {operation_context}: {detail}") from e
    except FileNotFoundError as e:
        raise RuntimeError(f"Failed to {operation_context}: {cmd[0]} not found") from e
