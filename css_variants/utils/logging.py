"""Logging utility for CSS Variants."""

import logging
import os
from typing import Optional, Union
from .config import LOG_FILE, LOG_LEVEL

def setup_logging(log_level: Optional[Union[int, str]] = None,
                  log_file: Optional[str] = None) -> None:
    """Set up logging configuration.

    Args:
        log_level: Level name or number, defaults to LOG_LEVEL
        log_file: Log file path, defaults to LOG_FILE
    """
    log_level = LOG_LEVEL if log_level is None else log_level
    if isinstance(log_level, str):
        log_level = logging.getLevelName(log_level.upper())
    log_file = log_file or LOG_FILE

    log_dir = os.path.dirname(log_file)
    if log_dir and not os.path.exists(log_dir):
        os.makedirs(log_dir)

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler()
        ]
    )

def get_logger(name):
    """Get a logger instance for the specified module.

    Args:
        name: Name of the module

    Returns:
        Logger instance
    """
    return logging.getLogger(name)

# Exported functions
__all__ = ['setup_logging', 'get_logger']
