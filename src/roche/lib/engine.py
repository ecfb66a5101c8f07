"""Hand a rendered Dockerfile to a container engine over stdin."""

import contextlib
import logging
import subprocess
from dataclasses import dataclass

from roche.exceptions import EngineUnreachableError, StreamIOError
from roche.lib.output import info

logger = logging.getLogger(__name__)


@dataclass
class BuildOutput:
    """
    Result of one engine build.

    Attributes
    ----------
    tag : str
        The ``-t<value>`` argument the build ran with.
    output : str
        Everything the engine wrote to stdout.
    returncode : int
        Engine exit status.
    """

    tag: str
    output: str
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def build_command(tag: str, engine: str = "docker", context: str = ".") -> list[str]:
    """
    Build the engine argv for a stdin-fed build.

    Parameters
    ----------
    tag : str
        Resolved ``-t<value>`` argument.
    engine : str, optional
        Engine executable, by default ``docker``.
    context : str, optional
        Build context directory, by default the current directory.

    Returns
    -------
    list of str
        Command suitable for subprocess.
    """
    return [engine, "build", tag, "-f-", context]


def invoke_build(
    tag: str,
    rendered: str,
    engine: str = "docker",
    context: str = ".",
) -> BuildOutput:
    """
    Run an engine build with the Dockerfile piped to stdin.

    The whole Dockerfile is written and stdin closed before stdout is read.
    The process is always waited on, including when a stream operation fails.

    Parameters
    ----------
    tag : str
        Resolved ``-t<value>`` argument.
    rendered : str
        Rendered Dockerfile text.
    engine : str, optional
        Engine executable, by default ``docker``.
    context : str, optional
        Build context directory, by default the current directory.

    Returns
    -------
    BuildOutput
        Captured output and exit status. A non-zero status is not raised.

    Raises
    ------
    EngineUnreachableError
        If the engine could not be spawned.
    StreamIOError
        If writing the Dockerfile or reading the output failed.
    """
    cmd = build_command(tag, engine=engine, context=context)
    logger.debug("Executing: %s", " ".join(cmd))

    try:
        process = subprocess.Popen(
            cmd,
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            text=True,
            errors="replace",
        )
    except OSError as e:
        raise EngineUnreachableError(f"Couldn't spawn {engine}: {e}", engine=engine)

    with process:
        try:
            process.stdin.write(rendered)
            process.stdin.close()
        except OSError as e:
            # The first close drops the unflushed buffer so the context
            # manager exit can still wait on the process.
            with contextlib.suppress(OSError):
                process.stdin.close()
            raise StreamIOError(f"Couldn't write to {engine} stdin: {e}")
        info(f"Sent file to builder for {tag}")

        try:
            output = process.stdout.read()
        except OSError as e:
            raise StreamIOError(f"Couldn't read {engine} stdout: {e}")
        returncode = process.wait()

    return BuildOutput(tag=tag, output=output, returncode=returncode)
