import logging
from typing import Optional

from chainutils.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-5s %(name)s - %(message)s"

_HANDLER_NAME = "chainutils"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a stream handler to the package logger. Safe to call repeatedly."""
    logger = logging.getLogger("chainutils")
    logger.setLevel((level or settings.log_level).upper())
    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
