"""git-recent CLI entry point.

This package provides a Click-based CLI that lists local git branches ranked
by their most recent commit and checks out the one picked from an interactive
terminal table. See `git-recent --help` for details.
"""

from git_recent.cli.cli import cli

__all__ = ["cli"]
