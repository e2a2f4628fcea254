"""
Logging for the liquid_metal package.

Modules log through ``logging.getLogger(__name__)``; `setup_logging` attaches
the handlers once, at the package logger, from the command line.
"""
import logging
import sys
from typing import Optional, Union

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: Union[int, str] = logging.INFO,
                  log_file: Optional[str] = None) -> logging.Logger:
    """
    Send package log records to stdout and, optionally, a file.

    Args:
        level: Level number or name ("DEBUG", "INFO", ...).
        log_file: Optional path; the file is truncated on start.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(__package__)
    logger.setLevel(level)
    # Re-running replaces handlers instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
