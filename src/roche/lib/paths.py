"""Path lookups for roche configuration and project files."""

import os
from pathlib import Path

RC_FILENAME = ".rocherc"
SOURCE_DIRNAME = "src"


def get_config_dir() -> Path:
    """
    Get the user configuration directory following the XDG Base Directory spec.

    Returns
    -------
    Path
        Path to ~/.config/roche/ or $XDG_CONFIG_HOME/roche/.
    """
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        base = Path(xdg_config_home)
    else:
        base = Path.home() / ".config"

    return base / "roche"


def get_config_file() -> Path:
    """
    Get path to the user configuration file.

    Returns
    -------
    Path
        Path to config.yaml in the configuration directory.
    """
    return get_config_dir() / "config.yaml"


def get_rc_files(root: Path | None = None) -> list[Path]:
    """
    Get candidate ``.rocherc`` files in load order.

    The file beside the entrypoint (``src/.rocherc``) comes first so that,
    since loading never overrides an existing variable, it takes precedence
    over the file at the invocation root.

    Parameters
    ----------
    root : Path or None, optional
        Invocation directory, by default the current working directory.

    Returns
    -------
    list of Path
        Both candidate paths, whether or not they exist.
    """
    root = root or Path.cwd()
    return [root / SOURCE_DIRNAME / RC_FILENAME, root / RC_FILENAME]
