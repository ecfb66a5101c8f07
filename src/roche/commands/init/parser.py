"""Parser configuration for init command."""

import argparse


def register_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the init command parser.

    Parameters
    ----------
    subparsers : argparse._SubParsersAction
        Subparser action from main parser
    """
    parser = subparsers.add_parser(
        "init",
        help="Generate a project",
        description=(
            "Generate a project from a template repository.\n\n"
            "Template is 'default', 'mongodb' or an https:// git location.\n"
            "If no template is given a functions.rs file is generated."
        ),
    )
    parser.add_argument(
        "template",
        nargs="?",
        help="Template name or git location",
    )
    parser.add_argument(
        "-n",
        "--name",
        help="Name of the project",
    )
    parser.add_argument(
        "-b",
        "--branch",
        default="main",
        help="Branch to use when installing from git (default: main)",
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Don't convert the project name to kebab-case before creating the directory",
    )
    # Own dest so the global --verbose is not reset by this subparser's default
    parser.add_argument(
        "-v",
        "--verbose",
        dest="init_verbose",
        action="store_true",
        help="Enable more verbose output",
    )
