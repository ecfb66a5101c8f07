"""Business logic for init command."""

import logging
import re
import subprocess
from pathlib import Path

from roche.exceptions import GenerationError
from roche.lib.formatters import format_command
from roche.templates import STARTER_SOURCE, read_template

logger = logging.getLogger(__name__)

TEMPLATE_REPOSITORIES = {
    "default": "https://github.com/roche-rs/default",
    "mongodb": "https://github.com/roche-rs/mongodb",
}


def resolve_template_source(template: str | None) -> str | None:
    """
    Map a template argument to a git repository.

    Parameters
    ----------
    template : str or None
        Template name or URL from the command line.

    Returns
    -------
    str or None
        Repository URL, or None when no remote template applies.

    Examples
    --------
    >>> resolve_template_source("mongodb")
    'https://github.com/roche-rs/mongodb'
    >>> resolve_template_source("https://example.com/t.git")
    'https://example.com/t.git'
    >>> resolve_template_source(None) is None
    True
    """
    if not template:
        return None
    if template in TEMPLATE_REPOSITORIES:
        return TEMPLATE_REPOSITORIES[template]
    if "https://" in template:
        return template
    return None


def to_kebab_case(name: str) -> str:
    """
    Convert a project name to kebab-case.

    Examples
    --------
    >>> to_kebab_case("MyService_v2")
    'my-service-v2'
    """
    name = re.sub(r"([a-z0-9])([A-Z])", r"\1-\2", name)
    name = re.sub(r"[^A-Za-z0-9]+", "-", name)
    return name.strip("-").lower()


def generate_command(
    repository: str,
    branch: str = "main",
    name: str | None = None,
    force: bool = False,
    verbose: bool = False,
) -> list[str]:
    """
    Build the cargo-generate argv for a template repository.

    cargo-generate converts ``name`` to kebab-case itself unless ``--force``
    is passed, and prompts for a name when none is given.

    Examples
    --------
    >>> generate_command("https://x", name="app", force=True)
    ['cargo', 'generate', '--git', 'https://x', '--branch', 'main', '--vcs', 'git', '--name', 'app', '--force']
    """
    cmd = ["cargo", "generate", "--git", repository, "--branch", branch, "--vcs", "git"]
    if name:
        cmd.extend(["--name", name])
    if force:
        cmd.append("--force")
    if verbose:
        cmd.append("--verbose")
    return cmd


def generate_project(
    repository: str,
    branch: str = "main",
    name: str | None = None,
    force: bool = False,
    verbose: bool = False,
) -> Path | None:
    """
    Generate a project from a template repository with cargo-generate.

    Parameters
    ----------
    repository : str
        Git location of the template.
    branch : str, optional
        Branch to check out, by default "main".
    name : str or None, optional
        Project name and target directory. cargo-generate prompts when absent.
    force : bool, optional
        Keep the name as given instead of converting it to kebab-case.
    verbose : bool, optional
        Enable cargo-generate's verbose output.

    Returns
    -------
    Path or None
        Directory of the generated project, or None when the name was
        entered interactively.

    Raises
    ------
    GenerationError
        If cargo-generate is not installed or exits non-zero, including when
        the target directory exists.
    """
    cmd = generate_command(repository, branch=branch, name=name, force=force, verbose=verbose)
    logger.debug("Executing: %s", format_command(cmd))

    try:
        result = subprocess.run(cmd, check=False)
    except OSError as e:
        raise GenerationError(
            f"Couldn't run cargo generate: {e}. Install it with 'cargo install cargo-generate'"
        )

    if result.returncode != 0:
        raise GenerationError(
            f"Couldn't generate project from {repository} (cargo generate exited with {result.returncode})"
        )

    if not name:
        return None
    return Path.cwd() / (name if force else to_kebab_case(name))


def write_starter_source(directory: Path | None = None) -> Path | None:
    """
    Write the embedded starter functions.rs.

    Parameters
    ----------
    directory : Path or None, optional
        Target directory, by default the current working directory.

    Returns
    -------
    Path or None
        The written file, or None if one already existed.
    """
    path = (directory or Path.cwd()) / STARTER_SOURCE
    try:
        with open(path, "x") as f:
            f.write(read_template(STARTER_SOURCE))
    except FileExistsError:
        return None
    return path
