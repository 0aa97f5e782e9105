"""Logging configuration helpers."""

import logging

from curtain_call.core.settings import settings


def configure_logging(level: str | None = None) -> None:
    """Configure application logging with a single stream handler."""
    logger = logging.getLogger("curtain_call")
    logger.setLevel((level or settings.log_level).upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
