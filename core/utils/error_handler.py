# -*- coding: utf-8 -*-
"""
Centralized error logging.
"""

import logging
from typing import Optional

logger = logging.getLogger("error_handler")


def _format_context(context: Optional[dict]) -> str:
    if not context:
        return ""
    return " | Context: " + ", ".join(f"{key}={value!r}" for key, value in context.items())


def log_exception(exception: Exception, message: str = "Unhandled exception", context: Optional[dict] = None):
    """
    Logs an exception with traceback without re-raising it.

    Args:
        exception (Exception): The exception being handled
        message (str): What was going on
        context (dict): Extra fields (user id, city, ...)
    """
    logger.error(
        "%s%s | Error: %r",
        message,
        _format_context(context),
        exception,
        exc_info=(type(exception), exception, exception.__traceback__),
    )
