from git_recent.cli.cli import cli


def main() -> None:
    """CLI entry point used by the `git-recent` console script."""
    cli()


if __name__ == "__main__":
    main()
