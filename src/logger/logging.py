# src/logger/logging.py
# Logging for the bootstrap: one stdout handler on the root logger.
# Each record is tagged with the run id of the bootstrap that emitted it,
# "-" for records logged outside of a run (imports, the startup banner).

import logging
import sys
from typing import Optional

from tracking.run_id import get_run_id

LOG_FORMAT = '%(asctime)s - [%(run_id)s] - %(name)s - %(levelname)s - %(message)s'

# Name given to our handler so setup_logging() can find and replace it
HANDLER_NAME = "mongo-tls-client"


class RunIDFilter(logging.Filter):
    """Stamp `record.run_id` for the formatter."""

    def filter(self, record):
        record.run_id = get_run_id() or "-"
        return True


def setup_logging(level: Optional[str] = None) -> logging.Handler:
    """
    Install the stdout handler on the root logger.

    Calling it again replaces the handler instead of stacking a second one,
    and only changes the level when one is given or read from config.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL.
               Defaults to settings.app.log_level (INFO if config is invalid).

    Returns:
        The installed handler
    """
    if level is None:
        try:
            from config import settings
            level = settings.app.log_level
        except RuntimeError:
            # Invalid environment; config import re-raises it right after
            level = "INFO"

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RunIDFilter())

    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler


def get_logger(name: Optional[str] = None):
    """Logger for a module; pass __name__."""
    return logging.getLogger(name)


setup_logging()
