"""Logging utility for CSS Inliner."""

import logging
import os
from typing import Optional
from .config import LOG_FORMAT, LOG_DATE_FORMAT, LOG_LEVEL

def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Set up logging configuration.
    
    Args:
        verbose: Log at DEBUG level instead of the configured default
        log_file: Optional file receiving a copy of every record
    """
    level = logging.DEBUG if verbose else getattr(logging, LOG_LEVEL)
    handlers = [logging.StreamHandler()]

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers
    )

# Exported functions
__all__ = ['setup_logging']
