"""
Handler setup for the ``navframe`` logger.

Library modules only call ``logging.getLogger(__name__)``; nothing is
emitted until an application calls :func:`setup_logging`.
"""
import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "navframe"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Marks handlers installed here, so a repeated call only replaces its own
_OWNED_ATTR = "_navframe_owned"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Route ``navframe`` records to a stream and optionally a file.

    Calling again replaces the handlers from the previous call. Handlers the
    application attached itself are left in place.

    Args:
        level: Level for the ``navframe`` logger.
        log_file: Optional path; records are appended to it.
        stream: Console stream, ``sys.stderr`` by default.

    Returns:
        The ``navframe`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in [h for h in logger.handlers if getattr(h, _OWNED_ATTR, False)]:
        logger.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler(stream if stream is not None else sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _OWNED_ATTR, True)
        logger.addHandler(handler)

    return logger
