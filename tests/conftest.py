"""Pytest configuration and shared fixtures."""

import logging
from argparse import Namespace

import pytest

from roche.config.loader import BuildConfig

ISOLATED_ENV_VARS = [
    "dev_build_image",
    "test_build_image",
    "release_build_image",
    "runtime_image",
    "container_engine",
    "DOCKER_USERNAME",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Remove roche variables from the environment for every test.

    Each variable is set then deleted so monkeypatch restores the original
    state even when ``.rocherc`` loading exports it during the test.
    """
    for name in ISOLATED_ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))

    yield

    roche_logger = logging.getLogger("roche")
    roche_logger.handlers.clear()
    roche_logger.propagate = True


@pytest.fixture
def build_config():
    """Configuration with the built-in defaults.

    Returns
    -------
    BuildConfig
        Default build configuration.
    """
    return BuildConfig()


@pytest.fixture
def project_dir(tmp_path, monkeypatch):
    """Create ``myapp`` with a functions.rs and make it the working directory.

    Returns
    -------
    Path
        Path to the project directory.
    """
    directory = tmp_path / "myapp"
    directory.mkdir()
    (directory / "functions.rs").write_text("pub fn handler() {}\n")
    monkeypatch.chdir(directory)
    return directory


@pytest.fixture
def make_ctx(build_config):
    """Factory for command context dictionaries.

    Returns
    -------
    callable
        ``make_ctx(command, dry_run=False, **args)`` returning a ctx dict.
    """

    def _make_ctx(command, dry_run=False, verbose=False, **args):
        defaults = {
            "buildimage": None,
            "runtimeimage": None,
            "libtestimage": None,
            "tag": None,
        }
        defaults.update(args)
        return {
            "config": build_config,
            "verbose": verbose,
            "dry_run": dry_run,
            "args": Namespace(command=command, **defaults),
        }

    return _make_ctx
