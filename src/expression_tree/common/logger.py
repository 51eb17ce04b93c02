"""Project-wide logger."""
import logging
import sys


LOGGER_NAME = "expression_tree"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(processName)s: %(message)s"


def _build_logger(name: str = LOGGER_NAME, level: int = logging.WARNING) -> logging.Logger:
    """
    Create the shared logger with a single stderr handler.

    Output goes to stderr so that stdout only carries program output.

    :param str name: Logger name
    :param int level: Initial logging level

    :return: Configured logger
    :rtype: logging.Logger
    """
    log = logging.getLogger(name)
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)
    log.setLevel(level)
    return log


def set_level(level: str | int) -> None:
    """
    Change the level of the shared logger.

    :param level: Level name (e.g. "INFO") or numeric level
    """
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)


logger: logging.Logger = _build_logger()
