"""Dockerfile generation command.

Available commands:
    roche gen    Write a release Dockerfile to the current directory
"""

from .handlers import handle
from .parser import register_parser

__all__ = ["register_parser", "handle"]
