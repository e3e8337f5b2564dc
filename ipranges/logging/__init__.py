"""
Logging setup and configuration module for the IP Ranges system.

This module provides a centralized way to set up logging across the application.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logging(name, level: Union[int, str] = logging.INFO, log_dir: Optional[str] = None):
    """
    Set up a logger with a console handler and an optional file handler.

    Args:
        name: The name of the logger (usually __name__ or the package name)
        level: The logging level (default: INFO)
        log_dir: Directory for a timestamped log file; no file is written if None

    Returns:
        A configured logger instance
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"{name.replace('.', '-')}_{timestamp}.log"

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

        logger.debug(f"Logger {name} initialized with log file: {log_file}")

    return logger
