"""
Formatting helpers for the roche CLI.

Classes
-------
CapitalizedHelpFormatter : argparse formatter with a capitalized usage prefix

Functions
---------
format_command : Render an argv list as a copy-pasteable shell line
"""

import argparse
import shlex


class CapitalizedHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """
    Help formatter that prints "Usage:" on its own line.

    Extends RawDescriptionHelpFormatter so multi-line descriptions keep their
    layout.
    """

    def add_usage(self, usage, actions, groups, prefix=None):
        if prefix is None:
            prefix = "Usage:\n  "
        return super().add_usage(usage, actions, groups, prefix)


def format_command(cmd: list[str]) -> str:
    """
    Format an argument vector for display.

    Parameters
    ----------
    cmd : list of str
        Command and arguments as passed to subprocess.

    Returns
    -------
    str
        Shell-quoted command line.

    Examples
    --------
    >>> format_command(["docker", "build", "-talice/dev-my app", "-f-", "."])
    "docker build '-talice/dev-my app' -f- ."
    """
    return shlex.join(cmd)
