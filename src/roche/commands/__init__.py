"""Subcommands of the roche CLI."""
