"""Console logging for the careerfit command line.

Library modules only create loggers with ``logging.getLogger(__name__)``;
attaching handlers is left to the CLI, which calls :func:`configure_logging`
once it knows the requested level.
"""

import logging
import sys

PACKAGE_LOGGER = "careerfit"

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _ConsoleHandler(logging.StreamHandler):
    """stderr handler owned by careerfit, so it can be found again and replaced."""


def _console_handler(logger: logging.Logger) -> _ConsoleHandler | None:
    for handler in logger.handlers:
        if isinstance(handler, _ConsoleHandler):
            return handler
    return None


def _parse_level(level: str | None) -> int:
    """Map a level name to its number; unknown or missing names mean INFO."""
    if not level:
        return logging.INFO
    number = logging.getLevelName(level.upper())
    return number if isinstance(number, int) else logging.INFO


def configure_logging(level: str | None = None) -> logging.Logger:
    """Send careerfit log records to stderr at ``level``.

    Repeated calls reuse the existing console handler and only change the
    level. Records stop propagating to the root logger while the handler is
    installed.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    log_level = _parse_level(level)
    logger.setLevel(log_level)

    handler = _console_handler(logger)
    if handler is None:
        handler = _ConsoleHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(CONSOLE_FORMAT, datefmt=CONSOLE_DATE_FORMAT)
        )
        logger.addHandler(handler)
        logger.propagate = False
    handler.setLevel(log_level)
    return logger


def reset_logging() -> None:
    """Remove the console handler and hand records back to the root logger."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handler = _console_handler(logger)
    if handler is not None:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
