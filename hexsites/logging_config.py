"""
Logging setup for scripts using hexsites.

Library modules only create `logging.getLogger(__name__)` loggers under
the 'hexsites' namespace and never attach handlers. Call `setup_logging`
from a script to see union and flake-building messages.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route 'hexsites' log records to stdout and, optionally, a file.

    Parameters
    ----------
    level : int
        Threshold for the package logger and its handlers.
        logging.DEBUG shows skipped duplicates in ordered_union.
    log_file : str, optional
        Also write records to this file (overwritten).

    Returns
    -------
    logger : logging.Logger
        The 'hexsites' package logger.
    """
    logger = logging.getLogger("hexsites")
    logger.setLevel(level)
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
