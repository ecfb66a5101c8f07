"""Terminal output helpers for the roche CLI."""

import sys


# None = auto-detect, True = force on, False = force off
_color_enabled = None


def set_color_enabled(enabled: bool) -> None:
    """
    Set global color output preference.

    Parameters
    ----------
    enabled : bool
        True to enable colors, False to disable.
    """
    global _color_enabled
    _color_enabled = enabled


class Colors:
    """ANSI escape sequences used by the output helpers."""

    RESET = "\033[0m"
    DIM = "\033[2m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"


def supports_color() -> bool:
    """
    Decide whether to emit ANSI colors.

    Returns
    -------
    bool
        The explicit preference if one was set, otherwise True when stdout
        is a TTY on a non-Windows platform.
    """
    if _color_enabled is not None:
        return _color_enabled
    return sys.stdout.isatty() and not sys.platform.startswith("win")


def colorize(text: str, color: str) -> str:
    if supports_color():
        return f"{color}{text}{Colors.RESET}"
    return text


def success(message: str) -> None:
    """Print a success line with a green check mark."""
    print(f"{colorize('✓', Colors.GREEN)} {message}")


def error(message: str) -> None:
    """Print an error line with a red cross to stderr."""
    print(f"{colorize('✗', Colors.RED)} {message}", file=sys.stderr)


def warning(message: str) -> None:
    """Print a warning line with a yellow warning sign."""
    print(f"{colorize('⚠', Colors.YELLOW)} {message}")


def info(message: str) -> None:
    """Print an indented informational line."""
    print(f"  {message}")


def dim(message: str) -> None:
    """Print an indented, dimmed line."""
    print(f"  {colorize(message, Colors.DIM)}")


def relay(text: str) -> None:
    """
    Write captured engine output through unchanged.

    Parameters
    ----------
    text : str
        Output read from a child process. A trailing newline is added
        only when the text does not already end with one.
    """
    if not text:
        return
    sys.stdout.write(text if text.endswith("\n") else text + "\n")
    sys.stdout.flush()
