"""Custom exceptions for the roche CLI tool.

Every fatal condition raised by the build pipeline derives from RocheError so
the CLI entry point can print one diagnostic and exit non-zero.
"""


class RocheError(Exception):
    """Base exception for all roche errors.

    Parameters
    ----------
    message : str
        Error message describing what went wrong.
    details : dict, optional
        Additional structured information about the error.

    Attributes
    ----------
    message : str
        The error message.
    details : dict
        Dictionary containing additional error context.
    """

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class ConfigError(RocheError):
    """Configuration loading error.

    Raised when:
    - The user config file contains invalid YAML
    - The user config file is not a mapping
    """

    pass


class EntrypointNotFoundError(RocheError):
    """Required source file missing from the working directory and ``src``.

    Parameters
    ----------
    message : str
        Error message.
    filenames : list of str, optional
        The files that could not be found.
    """

    def __init__(self, message: str, filenames: list[str] = None):
        details = {"files": ", ".join(filenames)} if filenames else {}
        super().__init__(message, details)
        self.filenames = filenames or []


class EngineUnreachableError(RocheError):
    """A container engine binary could not be spawned.

    Parameters
    ----------
    message : str
        Error message.
    engine : str, optional
        Name of the engine executable that failed to start.
    """

    def __init__(self, message: str, engine: str = None):
        details = {"engine": engine} if engine else {}
        super().__init__(message, details)
        self.engine = engine


class StreamIOError(RocheError):
    """Writing to or reading from a spawned engine's streams failed."""

    pass


class TagSynthesisError(RocheError):
    """No explicit tag was given and none could be derived."""

    pass


class TemplateError(RocheError):
    """Template lookup or rendering failed.

    Raised when:
    - An unknown template is requested
    - A placeholder marker survives rendering
    """

    pass


class GenerationError(RocheError):
    """Project generation from a remote template failed."""

    pass
