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
        description="Single-board terminal Kanban with JSON export/import",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory holding the stored board (default: ~/.local/share/minikanban)",
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

    commands = parser.add_mutually_exclusive_group()
    commands.add_argument(
        "--export",
        nargs="?",
        const=True,
        default=None,
        metavar="PATH",
        help="Export the board as JSON and exit (default: kanban_board.json)",
    )
    commands.add_argument(
        "--import",
        dest="import_path",
        type=Path,
        default=None,
        metavar="PATH",
        help="Replace the board with a JSON snapshot and exit",
    )
    commands.add_argument(
        "--reset",
        action="store_true",
        help="Reset the board to the default board and exit",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    # Build settings from CLI args
    settings_kwargs: dict = {}
    if args.data_dir:
        settings_kwargs["data_dir"] = args.data_dir
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file
    if isinstance(args.export, str):
        settings_kwargs["export_path"] = Path(args.export)

    settings = Settings(**settings_kwargs)

    setup_logging(settings.verbose, settings.log_file)

    if args.export is not None or args.import_path is not None or args.reset:
        from .cli.commands import run_export, run_import, run_reset
        from .services import build_services

        services = build_services(settings)
        if args.export is not None:
            exit_code = run_export(services, services.default_export_path(settings))
        elif args.import_path is not None:
            exit_code = run_import(services, args.import_path)
        else:
            exit_code = run_reset(services)
        raise SystemExit(exit_code)

    # Import here so the non-interactive commands don't load textual
    from .app import run

    run(settings)


if __name__ == "__main__":
    main()
