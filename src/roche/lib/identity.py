"""
Login discovery for image tags.

The account name used to namespace synthesized tags comes from, in order:
the DOCKER_USERNAME environment variable, ``docker info``, and
``podman login --get-login``.
"""

import logging
import os
import subprocess
from abc import ABC, abstractmethod

from roche.exceptions import EngineUnreachableError

logger = logging.getLogger(__name__)

IDENTITY_ENV_VAR = "DOCKER_USERNAME"


class LoginProvider(ABC):
    """
    A container engine that can report the logged-in account.

    Subclasses set ``engine`` and ``command`` and implement ``parse``.
    """

    engine: str = ""
    command: tuple[str, ...] = ()

    def probe(self) -> str | None:
        """
        Ask the engine for the current login.

        Returns
        -------
        str or None
            Account name, or None if the engine ran but reported no login.

        Raises
        ------
        EngineUnreachableError
            If the engine executable could not be spawned.
        """
        try:
            result = subprocess.run(
                list(self.command),
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                errors="replace",
                check=False,
            )
        except OSError as e:
            raise EngineUnreachableError(f"Couldn't spawn {self.engine}: {e}", engine=self.engine)

        logger.debug("%s exited with %s", " ".join(self.command), result.returncode)
        return self.parse(result.stdout or "")

    @abstractmethod
    def parse(self, output: str) -> str | None:
        """Extract the account name from the engine output."""


class DockerInfoLogin(LoginProvider):
    """Read the ``Username:`` line from ``docker info``."""

    engine = "docker"
    command = ("docker", "info")

    def parse(self, output: str) -> str | None:
        username = ""
        for line in output.splitlines():
            if "Username" in line:
                tokens = line.split()
                username = tokens[-1] if tokens else ""
        return username or None


class PodmanLogin(LoginProvider):
    """Take the first line printed by ``podman login --get-login``."""

    engine = "podman"
    command = ("podman", "login", "--get-login")

    def parse(self, output: str) -> str | None:
        lines = output.splitlines()
        username = lines[0] if lines else ""
        return username or None


def default_providers() -> list[LoginProvider]:
    return [DockerInfoLogin(), PodmanLogin()]


def resolve_identity(providers: list[LoginProvider] | None = None) -> str | None:
    """
    Discover the account name to namespace image tags with.

    Parameters
    ----------
    providers : list of LoginProvider or None, optional
        Engines to ask, in priority order. Defaults to docker then podman.

    Returns
    -------
    str or None
        The first non-empty login found, or None when every engine ran but
        none reported a login.

    Raises
    ------
    EngineUnreachableError
        If the last provider could not be spawned. Spawn failures of earlier
        providers fall through to the next one.
    """
    override = os.environ.get(IDENTITY_ENV_VAR)
    if override:
        return override
    logger.debug("%s not set, asking container engines", IDENTITY_ENV_VAR)

    providers = default_providers() if providers is None else providers
    for index, provider in enumerate(providers):
        try:
            identity = provider.probe()
        except EngineUnreachableError as e:
            if index == len(providers) - 1:
                raise EngineUnreachableError(
                    "No username found with docker or podman",
                    engine=e.engine,
                ) from e
            logger.debug("%s", e)
            continue

        if identity:
            logger.debug("Using %s login %s", provider.engine, identity)
            return identity

    return None
