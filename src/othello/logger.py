"""
Logging utilities for the Othello engine.
"""
import os
import logging
from typing import List

from .config import Config

LOGGER_NAME = 'othello'
FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Handlers installed by setup_logger, removed again on the next call
_handlers: List[logging.Handler] = []


def setup_logger(config: Config) -> logging.Logger:
    """
    Set up and return the package logger.

    Args:
        config: Configuration object; its `logging` section picks the level
            and, when `log_dir` is set, the file to write to

    Returns:
        The configured 'othello' logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    close_logger()

    level = getattr(logging, config.logging.log_level.upper(), logging.INFO)
    logger.setLevel(level)
    formatter = logging.Formatter(FORMAT)

    # Set up console logging
    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(formatter)
    _handlers.append(console)

    # Set up file logging
    if config.logging.log_dir:
        os.makedirs(config.logging.log_dir, exist_ok=True)
        log_file = os.path.join(config.logging.log_dir, config.logging.log_file)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        _handlers.append(file_handler)

    for handler in _handlers:
        logger.addHandler(handler)
    return logger


def close_logger():
    """Remove and close the handlers installed by setup_logger."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in _handlers:
        logger.removeHandler(handler)
        handler.close()
    _handlers.clear()
