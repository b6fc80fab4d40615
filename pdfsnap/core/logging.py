import logging
from logging import Logger

from .config import get_settings

LOG_FORMAT = "[%(levelname)s] %(asctime)s | %(name)s | %(message)s"


def configure_logging() -> Logger:
    """
    Return the PDFSnap logger, named after ``settings.app_name``.

    The handler and the ``LOG_LEVEL`` threshold are applied on the first call;
    later calls hand back the same logger untouched.
    """
    settings = get_settings()

    logger = logging.getLogger(settings.app_name)
    if logger.handlers:
        return logger

    logger.setLevel(settings.log_level)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.addHandler(handler)
    logger.propagate = False

    logger.debug("Logging configured at %s for %s %s", settings.log_level, settings.app_name, settings.app_version)
    return logger
