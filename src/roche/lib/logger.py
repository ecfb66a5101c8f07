"""
Diagnostic logging setup for roche.

User-facing messages go through ``roche.lib.output``. This module only
configures the ``roche`` logger hierarchy used for debug traces of engine
probes, config sources and rendering steps.
"""

import logging
import os
import sys


def setup_logger(name: str = "roche", verbose: bool = False) -> logging.Logger:
    """
    Configure the roche logger.

    Parameters
    ----------
    name : str, optional
        Logger name. Library modules log under ``roche.*`` and propagate here.
    verbose : bool, optional
        Force DEBUG level regardless of LOG_LEVEL.

    Returns
    -------
    logging.Logger
        Configured logger instance.

    Environment Variables
    ---------------------
    LOG_LEVEL : str
        DEBUG, INFO, WARNING, ERROR or CRITICAL (default: WARNING)
    """
    logger = logging.getLogger(name)

    if verbose:
        level = logging.DEBUG
    else:
        log_level = os.getenv("LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, log_level, logging.WARNING)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates if called multiple times
    logger.handlers.clear()

    # stderr keeps stdout free for relayed engine output
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_create_formatter(name))
    logger.addHandler(handler)

    logger.propagate = False

    return logger


def _create_formatter(name: str) -> logging.Formatter:
    return logging.Formatter(
        fmt=f"%(asctime)s {name} %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
