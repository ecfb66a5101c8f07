"""
Command Helper Functions.

Functions
---------
require_config : Get the build configuration with validation
handle_dry_run : Handle dry-run mode with consistent messaging
pick : Choose a CLI flag value over a configured default
"""

from typing import TypedDict

from roche.config.loader import BuildConfig
from roche.exceptions import ConfigError
from roche.lib.output import info


class CommandContext(TypedDict):
    """
    Type-safe command context dictionary.

    Attributes
    ----------
    config : BuildConfig
        Resolved image and engine defaults.
    verbose : bool
        Enable verbose output.
    dry_run : bool
        Render and report without spawning any engine.
    args : argparse.Namespace
        Parsed command-line arguments.
    """

    config: BuildConfig
    verbose: bool
    dry_run: bool
    args: object  # argparse.Namespace


def require_config(ctx: CommandContext) -> BuildConfig:
    """
    Ensure the build configuration is loaded and return it.

    Raises
    ------
    ConfigError
        If no configuration was loaded into the context.
    """
    config = ctx.get("config")
    if config is None:
        raise ConfigError("Build configuration not loaded")
    return config


def handle_dry_run(ctx: CommandContext, message: str, details: dict = None) -> bool:
    """
    Handle dry-run mode with consistent messaging.

    Parameters
    ----------
    ctx : CommandContext
        Command context dictionary.
    message : str
        Main action description.
    details : dict, optional
        Additional details to display.

    Returns
    -------
    bool
        True if in dry-run mode (caller should return early), False otherwise.

    Examples
    --------
    >>> if handle_dry_run(ctx, "Build image", {"tag": "-talice/dev-myapp"}):
    ...     return 0
    """
    if not ctx.get("dry_run"):
        return False

    info(f"DRY RUN: {message}")

    if details:
        for key, value in details.items():
            info(f"  {key}: {value}")

    return True


def pick(flag_value: str | None, default: str) -> str:
    """Return the flag value when given and non-empty, else the default."""
    return flag_value if flag_value else default
