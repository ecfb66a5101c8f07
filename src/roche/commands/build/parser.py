"""Parser configuration for the build, test and release commands."""

import argparse


def _add_image_arguments(parser: argparse.ArgumentParser, default_hint: str) -> None:
    parser.add_argument(
        "-b",
        "--buildimage",
        help=f"Build image to use (default: {default_hint})",
    )
    parser.add_argument(
        "-r",
        "--runtime",
        "--runtimeimage",
        dest="runtimeimage",
        help="Runtime base image to use (default: $runtime_image or quay.io/roche/alpine-libgcc:3.12)",
    )


def _add_tag_argument(parser: argparse.ArgumentParser, what: str) -> None:
    parser.add_argument(
        "-t",
        "--tag",
        help=f"Tag for the {what} (default: derived from login and folder name)",
    )


def register_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the build, test and release command parsers.

    Parameters
    ----------
    subparsers : argparse._SubParsersAction
        Subparser action from main parser
    """
    # roche build
    build_parser = subparsers.add_parser(
        "build",
        help="Build a development image",
        description="Build a development image from functions.rs",
    )
    _add_image_arguments(build_parser, "$dev_build_image or quay.io/roche/dev-default:1.4.0")
    _add_tag_argument(build_parser, "build")

    # roche test
    test_parser = subparsers.add_parser(
        "test",
        help="Run the lib tests in an image",
        description="Build an image that runs the tests in lib.rs",
    )
    test_parser.add_argument(
        "-l",
        "--libtestimage",
        help="Lib test image to use (default: $test_build_image or quay.io/roche/dev-default:1.4.0)",
    )
    _add_tag_argument(test_parser, "test run")

    # roche release
    release_parser = subparsers.add_parser(
        "release",
        help="Build a release image",
        description="Build a release image, running lib tests when lib.rs exists",
    )
    _add_image_arguments(release_parser, "$release_build_image or quay.io/roche/default:1.4.0")
    _add_tag_argument(release_parser, "build")
