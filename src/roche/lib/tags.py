"""Image tag derivation."""

import logging
from pathlib import Path

from roche.exceptions import TagSynthesisError
from roche.lib.identity import resolve_identity
from roche.lib.paths import SOURCE_DIRNAME

logger = logging.getLogger(__name__)

TAG_FLAG = "-t"


def base_label(directory: Path | None = None) -> str:
    """
    Derive the project label from a directory path.

    Parameters
    ----------
    directory : Path or None, optional
        Directory to label, by default the current working directory.

    Returns
    -------
    str
        The last path segment, or its parent's when the last segment is
        ``src``. Empty when the path has no usable segment (e.g. ``/``).

    Examples
    --------
    >>> base_label(Path("/home/u/myapp"))
    'myapp'
    >>> base_label(Path("/home/u/myapp/src"))
    'myapp'
    """
    directory = directory or Path.cwd()
    if directory.name == SOURCE_DIRNAME:
        return directory.parent.name
    return directory.name


def synthesize_tag(kind_prefix: str, directory: Path | None = None) -> str:
    """
    Build a tag from the project directory and the current login.

    Parameters
    ----------
    kind_prefix : str
        Build kind prefix, e.g. ``"dev-"``, ``"test-"`` or ``""``.
    directory : Path or None, optional
        Directory to label, by default the current working directory.

    Returns
    -------
    str
        ``<identity>/<kind_prefix><label>`` when a login is known,
        otherwise ``<kind_prefix><label>``.

    Raises
    ------
    TagSynthesisError
        If no project label can be derived from the directory.
    """
    label = base_label(directory)
    if not label:
        raise TagSynthesisError(
            "No tag provided and couldn't generate a tag. "
            "Please check you have logged into docker or podman"
        )

    identity = resolve_identity()
    if identity:
        return f"{identity}/{kind_prefix}{label}"
    return f"{kind_prefix}{label}"


def resolve_tag(explicit: str | None, kind_prefix: str) -> tuple[str, bool]:
    """
    Resolve the ``-t<value>`` argument for an engine build.

    Parameters
    ----------
    explicit : str or None
        Tag given on the command line.
    kind_prefix : str
        Prefix used if a tag must be synthesized.

    Returns
    -------
    tuple of (str, bool)
        The tag argument and whether it was synthesized.
    """
    if explicit:
        return f"{TAG_FLAG}{explicit}", False

    tag = synthesize_tag(kind_prefix)
    logger.debug("Synthesized tag %s", tag)
    return f"{TAG_FLAG}{tag}", True
