"""Locate the build entrypoint and move into the directory that holds it."""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from roche.exceptions import EntrypointNotFoundError
from roche.lib.paths import SOURCE_DIRNAME

logger = logging.getLogger(__name__)

ENTRYPOINT_FILENAME = "functions.rs"
LIBRARY_FILENAME = "lib.rs"


def _has_all(directory: Path, filenames: Iterable[str]) -> bool:
    return all((directory / name).is_file() for name in filenames)


def locate_build_entrypoint(required_filenames: Iterable[str] = (ENTRYPOINT_FILENAME,)) -> Path:
    """
    Make sure the working directory holds the required source files.

    The current directory is checked first, then its ``src`` subdirectory.
    If the files are only found under ``src``, the process changes into it.

    Parameters
    ----------
    required_filenames : iterable of str, optional
        Files that must all exist, by default ``functions.rs``.

    Returns
    -------
    Path
        The (possibly relocated) working directory.

    Raises
    ------
    EntrypointNotFoundError
        If neither location has every required file.
    """
    required = sorted(set(required_filenames))
    cwd = Path.cwd()

    if _has_all(cwd, required):
        return cwd

    src_dir = cwd / SOURCE_DIRNAME
    if _has_all(src_dir, required):
        logger.debug("Changing working directory to %s", src_dir)
        os.chdir(src_dir)
        return src_dir

    raise EntrypointNotFoundError(
        f"Cannot find {', '.join(required)} in the current folder or in src subfolder",
        filenames=required,
    )


def require_library_file(filename: str = LIBRARY_FILENAME) -> Path:
    """
    Check that the test entrypoint exists in the working directory.

    Call after ``locate_build_entrypoint`` so the check runs in the
    relocated directory.

    Raises
    ------
    EntrypointNotFoundError
        If the file is missing.
    """
    path = Path.cwd() / filename
    if not path.is_file():
        raise EntrypointNotFoundError(
            f"Cannot find {filename} in the src folder", filenames=[filename]
        )
    return path
