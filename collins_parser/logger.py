"""
Logging configuration for the Collins page parser.
"""

import logging
import sys
from typing import Optional, Union


def setup_logger(
    name: str = "collins_parser",
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up and return a logger instance.

    Args:
        name: Logger name
        level: Logging level, numeric or by name ("DEBUG", "INFO", ...)
        log_file: Optional file path for logging

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    # Calling again only adjusts the level; handlers are installed once
    if logger.handlers:
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    logger.setLevel(level)

    # Format: timestamp - module - level - message
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


# Default logger instance, created once at import time
logger = setup_logger()


def get_module_logger(module_name: str) -> logging.Logger:
    """
    Get a child logger for a specific module.

    Child loggers (e.g. "collins_parser.classifier") inherit the package
    logger's handlers and level, and their name shows which stage
    produced each message.

    Args:
        module_name: Name of the module (e.g., 'classifier', 'extractors')

    Returns:
        Child logger instance
    """
    return logging.getLogger(f"collins_parser.{module_name}")
