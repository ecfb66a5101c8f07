"""Build configuration loader with rc-file and user-file support."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from roche.exceptions import ConfigError
from roche.lib.paths import get_config_file, get_rc_files

logger = logging.getLogger(__name__)

DEFAULT_DEV_BUILD_IMAGE = "quay.io/roche/dev-default:1.4.0"
DEFAULT_TEST_BUILD_IMAGE = "quay.io/roche/dev-default:1.4.0"
DEFAULT_RELEASE_BUILD_IMAGE = "quay.io/roche/default:1.4.0"
DEFAULT_RUNTIME_IMAGE = "quay.io/roche/alpine-libgcc:3.12"
DEFAULT_ENGINE = "docker"

# field name -> (environment variable, user config key path, built-in default)
_SETTINGS = {
    "dev_build_image": ("dev_build_image", "images.dev_build", DEFAULT_DEV_BUILD_IMAGE),
    "test_build_image": ("test_build_image", "images.test_build", DEFAULT_TEST_BUILD_IMAGE),
    "release_build_image": (
        "release_build_image",
        "images.release_build",
        DEFAULT_RELEASE_BUILD_IMAGE,
    ),
    "runtime_image": ("runtime_image", "images.runtime", DEFAULT_RUNTIME_IMAGE),
    "engine": ("container_engine", "engine", DEFAULT_ENGINE),
}


@dataclass(frozen=True)
class BuildConfig:
    """
    Resolved image and engine defaults for one invocation.

    CLI flags are applied on top of these values by the command handlers.

    Attributes
    ----------
    dev_build_image : str
        Builder image for ``roche build``.
    test_build_image : str
        Builder image for ``roche test``.
    release_build_image : str
        Builder image for ``roche release`` and ``roche gen``.
    runtime_image : str
        Base image of the final stage.
    engine : str
        Container engine executable used for builds.
    sources : list of str
        Files that contributed values, in load order.
    """

    dev_build_image: str = DEFAULT_DEV_BUILD_IMAGE
    test_build_image: str = DEFAULT_TEST_BUILD_IMAGE
    release_build_image: str = DEFAULT_RELEASE_BUILD_IMAGE
    runtime_image: str = DEFAULT_RUNTIME_IMAGE
    engine: str = DEFAULT_ENGINE
    sources: list[str] = field(default_factory=list, compare=False)


class ConfigLoader:
    """
    Load the build configuration from every supported source.

    Precedence, highest first:
    1. Process environment variables
    2. ``src/.rocherc`` then ``.rocherc`` (never override existing variables)
    3. User config file (``~/.config/roche/config.yaml``)
    4. Built-in defaults

    Attributes
    ----------
    root : Path
        Invocation directory used to locate the rc files.
    config_path : Path
        Path to the user configuration file.
    """

    def __init__(self, root: Path | None = None, config_path: Path | None = None):
        self.root = root or Path.cwd()
        self.config_path = config_path or get_config_file()

    def _load_rc_files(self) -> list[str]:
        """
        Export variables from the rc files into the process environment.

        Returns
        -------
        list of str
            Paths of the rc files that existed and were loaded.
        """
        loaded = []
        for rc_file in get_rc_files(self.root):
            if rc_file.is_file():
                load_dotenv(rc_file, override=False)
                logger.debug("Loaded environment from %s", rc_file)
                loaded.append(str(rc_file))
        return loaded

    def _load_yaml_file(self, path: Path) -> dict:
        """
        Load and parse the user YAML configuration file.

        Parameters
        ----------
        path : Path
            Path to YAML file to load.

        Returns
        -------
        dict
            Parsed YAML content, or empty dict if the file doesn't exist.

        Raises
        ------
        ConfigError
            If the file contains invalid YAML or is not a mapping.
        """
        if not path.exists():
            return {}

        try:
            with open(path) as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}")

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigError(f"Expected a mapping at the top of {path}")
        return content

    def load(self) -> BuildConfig:
        """
        Resolve every setting and return the populated configuration.

        Returns
        -------
        BuildConfig
            Configuration with every field set to a non-empty string.
        """
        sources = self._load_rc_files()

        user_config = self._load_yaml_file(self.config_path)
        if user_config:
            sources.append(str(self.config_path))

        values = {}
        for name, (env_var, key_path, default) in _SETTINGS.items():
            value = os.environ.get(env_var) or get_config_value(user_config, key_path) or default
            values[name] = str(value)
            logger.debug("%s = %s", name, values[name])

        return BuildConfig(sources=sources, **values)


def get_config_value(config: dict, key_path: str, default: Any = None) -> Any:
    """
    Get configuration value using dot notation path.

    Parameters
    ----------
    config : dict
        Configuration dictionary to query.
    key_path : str
        Key path in dot notation (e.g., "images.runtime").
    default : Any, optional
        Default value to return if key doesn't exist, by default None.

    Returns
    -------
    Any
        Configuration value if found, default value otherwise.

    Examples
    --------
    >>> get_config_value({"images": {"runtime": "alpine:3"}}, "images.runtime")
    'alpine:3'
    >>> get_config_value({}, "images.runtime", "default")
    'default'
    """
    value = config

    for key in key_path.split("."):
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default

    return value
