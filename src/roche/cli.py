"""Main CLI entry point for roche."""

import argparse
import sys

from roche import __version__
from roche.config.loader import ConfigLoader
from roche.exceptions import ConfigError, RocheError
from roche.lib.formatters import CapitalizedHelpFormatter
from roche.lib.logger import setup_logger
from roche.lib.output import dim, error, set_color_enabled


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser with all commands registered.

    Returns
    -------
    argparse.ArgumentParser
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="roche",
        description="A tool for building rust http and event services using containers",
        formatter_class=CapitalizedHelpFormatter,
    )

    # Global options
    parser.add_argument("--version", "-V", action="version", version=f"roche {__version__}")
    parser.add_argument("--verbose", action="store_true", help="Verbose output")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the rendered Dockerfile and engine command instead of building",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")

    parser._optionals.title = "Options"

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Apply the help formatter and "Options" title to every subcommand
    original_add_parser = subparsers.add_parser

    def custom_add_parser(*args, **kwargs):
        if "formatter_class" not in kwargs:
            kwargs["formatter_class"] = CapitalizedHelpFormatter
        subparser = original_add_parser(*args, **kwargs)
        subparser._optionals.title = "Options"
        return subparser

    subparsers.add_parser = custom_add_parser

    from roche.commands import build, gen, init

    init.register_parser(subparsers)
    build.register_parser(subparsers)
    gen.register_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Main CLI entry point for the roche command.

    Parameters
    ----------
    argv : list of str or None, optional
        Arguments to parse, by default ``sys.argv[1:]``.

    Returns
    -------
    int
        Exit code: 0 for success, 1 for command failure, 2 for configuration
        error, 130 for keyboard interrupt.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.no_color:
        set_color_enabled(False)

    setup_logger(verbose=args.verbose)

    if not args.command:
        error("No subcommand was used - try 'roche --help'")
        parser.print_help()
        return 1

    try:
        config = ConfigLoader().load()
    except ConfigError as e:
        error(f"Failed to load configuration: {e}")
        return 2

    if args.verbose:
        for source in config.sources:
            dim(f"Config source: {source}")

    ctx = {
        "config": config,
        "verbose": args.verbose,
        "dry_run": args.dry_run,
        "args": args,
    }

    try:
        if args.command in ("build", "test", "release"):
            from roche.commands import build

            return build.handle(ctx)
        elif args.command == "gen":
            from roche.commands import gen

            return gen.handle(ctx)
        elif args.command == "init":
            from roche.commands import init

            return init.handle(ctx)
        else:
            error(f"Command '{args.command}' not yet implemented")
            return 1

    except KeyboardInterrupt:
        print()
        return 130
    except RocheError as e:
        error(str(e))
        if ctx["verbose"]:
            import traceback

            traceback.print_exc()
        return 1
    except Exception as e:
        error(f"Command failed: {e}")
        if ctx["verbose"]:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
