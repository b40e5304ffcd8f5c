"""CLI entry point for minikanban."""

import argparse
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="minikanban",
        description="Terminal Kanban board for a remote task API",
    )
    parser.add_argument(
        "--api-url",
        default=None,
        help="Base URL of the task API (default: http://localhost:8080)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Build settings from CLI args, falling back to MINIKANBAN_* env vars."""
    settings_kwargs: dict = {}
    if args.api_url:
        settings_kwargs["api_url"] = args.api_url
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file
    return Settings(**settings_kwargs)


def main() -> None:
    """Main entry point."""
    settings = build_settings(parse_args())

    setup_logging(settings.verbose, settings.log_file)

    # Import here so --help and --version stay fast
    from .app import run

    run(settings)


if __name__ == "__main__":
    main()
