"""Parser configuration for gen command."""

import argparse


def register_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the gen command parser.

    Parameters
    ----------
    subparsers : argparse._SubParsersAction
        Subparser action from main parser
    """
    parser = subparsers.add_parser(
        "gen",
        help="Generate a release Dockerfile",
        description="Write the release Dockerfile to ./Dockerfile without building it",
    )
    parser.add_argument(
        "-b",
        "--buildimage",
        help="Build image to use (default: $release_build_image or quay.io/roche/default:1.4.0)",
    )
    parser.add_argument(
        "-r",
        "--runtime",
        "--runtimeimage",
        dest="runtimeimage",
        help="Runtime base image to use (default: $runtime_image or quay.io/roche/alpine-libgcc:3.12)",
    )
