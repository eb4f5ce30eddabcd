"""
Logging Configuration
Sets up the 'gottip' logger. Rejected subtotal edits are logged at DEBUG, so
a DEBUG run shows every keystroke the sanitizer refused.
"""
import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "gottip"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _make_handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the package logger.

    Args:
        level: Logging level, as a number (logging.DEBUG) or a name ("DEBUG").
        log_file: Optional path; the log is also written there, overwriting it.

    Returns:
        The configured 'gottip' logger.
    """
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level {name!r}.")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # main() may run more than once in a process (tests, restarts)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    logger.addHandler(_make_handler(logging.StreamHandler(sys.stdout), level))
    if log_file:
        logger.addHandler(_make_handler(logging.FileHandler(log_file, mode='w', encoding='utf-8'), level))

    logger.debug("Logging initialized at %s.", logging.getLevelName(level))
    return logger
