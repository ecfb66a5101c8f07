"""roche: build Rust http and event services using containers."""

__version__ = "0.3.1"
