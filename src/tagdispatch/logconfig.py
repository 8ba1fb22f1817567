"""Logging setup for applications that want to see dispatch activity

The library logs registrations and dispatch decisions at DEBUG level under
the 'tagdispatch' logger, which has a 'NullHandler' so nothing is printed
unless the application asks for it::

    from tagdispatch.logconfig import setup_logging
    setup_logging("DEBUG")
"""

import logging
import sys

__all__ = ['LOGGER_NAME', 'levelNumber', 'setup_logging', 'disable_logging']

LOGGER_NAME = "tagdispatch"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def levelNumber(level):
    """Return 'level' as a number; it may be a level name or number"""
    if isinstance(level, int):
        return level
    number = logging.getLevelName(str(level).upper())
    if not isinstance(number, int):
        raise ValueError("Unknown logging level: %r" % (level,))
    return number


def setup_logging(level=logging.INFO, format=None, stream=None,
    filename=None, force=False
):
    """Send 'tagdispatch' records at or above 'level' to a stream or file

    'stream' defaults to 'sys.stderr'; pass 'False' to log only to
    'filename'.  With 'force', existing handlers are removed first.
    Records are not passed on to the root logger's handlers.
    """
    level = levelNumber(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    if force:
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

    handlers = []
    if stream is not False:
        handlers.append(logging.StreamHandler(stream or sys.stderr))
    if filename:
        handlers.append(logging.FileHandler(filename))

    formatter = logging.Formatter(format or DEFAULT_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def disable_logging():
    """Remove all handlers and silence the 'tagdispatch' logger"""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


_root_logger = logging.getLogger(LOGGER_NAME)
if not _root_logger.handlers:
    _root_logger.addHandler(logging.NullHandler())
