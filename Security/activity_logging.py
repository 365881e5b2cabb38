"""
ACTIVITY TRACKING
=================
Structured request logging for monitoring.

FLOW:
- Middleware logs each request with timing and request context.
- Added to the FastAPI middleware stack in app/main.py.

HOW:
- Writes structured request logs to <LOG_DIR>/activity.log.
- get_file_logger() is shared by the audit and application loggers.
"""

from __future__ import annotations

import logging
import os
import time
from logging.handlers import RotatingFileHandler

from starlette.middleware.base import BaseHTTPMiddleware

from Security.security_config import SETTINGS


def get_file_logger(name: str, filename: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    log_dir = SETTINGS["LOG_DIR"]
    os.makedirs(log_dir, exist_ok=True)
    handler = RotatingFileHandler(os.path.join(log_dir, filename), maxBytes=2_000_000, backupCount=3)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    handler.setFormatter(formatter)

    logger.setLevel(SETTINGS["LOG_LEVEL"])
    logger.addHandler(handler)
    return logger


class ActivityLoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app):
        super().__init__(app)
        self.logger = get_file_logger("contacts.activity", "activity.log")

    async def dispatch(self, request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration = (time.perf_counter() - start) * 1000
        request_id = getattr(request.state, "request_id", None)
        self.logger.info(
            "method=%s path=%s status=%s duration_ms=%.2f request_id=%s ip=%s",
            request.method,
            request.url.path,
            response.status_code,
            duration,
            request_id or "",
            request.client.host if request.client else "unknown",
        )
        return response
