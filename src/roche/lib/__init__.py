"""Shared helpers for roche commands."""
