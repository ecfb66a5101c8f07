"""Embedded Dockerfile templates and the starter source file."""

from pathlib import Path

from roche.exceptions import TemplateError

TEMPLATE_DIR = Path(__file__).parent

DEV_DOCKERFILE = "Dev.Dockerfile"
LIBTEST_DOCKERFILE = "Libtest.Dockerfile"
RELEASE_DOCKERFILE = "Release.Dockerfile"
STARTER_SOURCE = "functions.rs"


def read_template(name: str) -> str:
    """
    Read an embedded template by file name.

    Raises
    ------
    TemplateError
        If no template with that name ships with the package.
    """
    path = TEMPLATE_DIR / name
    if not path.is_file():
        raise TemplateError(f"Unknown template: {name}")
    return path.read_text()
