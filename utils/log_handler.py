"""
Logging setup for the application loggers.
"""

import logging
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

APP_LOGGERS = ['core', 'models', 'utils', 'reports', 'workflow']


def setup_logging(level=logging.INFO) -> logging.Handler:
    """
    Route application logs to stderr through a single root handler.

    Args:
        level: Logging level (int or name such as "DEBUG")

    Returns:
        The installed handler
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger = logging.getLogger()

    # Drop plain stream handlers from earlier setups to avoid duplicate lines;
    # subclasses (file handlers, capture handlers) stay attached
    for handler in root_logger.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # Child loggers must propagate to reach the root handler
    for logger_name in APP_LOGGERS:
        child_logger = logging.getLogger(logger_name)
        child_logger.setLevel(level)
        child_logger.propagate = True
        for child_handler in child_logger.handlers[:]:
            child_logger.removeHandler(child_handler)

    return handler
