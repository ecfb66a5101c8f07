"""Configuration loading for roche."""
