"""Project generation command.

Available commands:
    roche init [template]    Generate a project or a starter functions.rs
"""

from .handlers import handle
from .parser import register_parser

__all__ = ["register_parser", "handle"]
