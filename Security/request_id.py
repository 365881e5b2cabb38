"""
REQUEST ID
==========
Tag every request with an id that the activity and audit logs can share.
"""

# FLOW:
# - Runs outermost, before activity logging and the audit context.
# HOW:
# - A caller-supplied id is reused only when it is short and made of
#   log-safe characters; anything else gets a fresh hex id.
# - The id lands on request.state and is echoed in the response header.

from __future__ import annotations

import re
import uuid

from starlette.middleware.base import BaseHTTPMiddleware

from Security.security_config import SETTINGS

REQUEST_ID_PATTERN = re.compile(r"[A-Za-z0-9._:-]+")


def new_request_id() -> str:
    return uuid.uuid4().hex


def accepted_request_id(raw: str | None, max_length: int | None = None) -> str | None:
    """The incoming id if it is safe to write into log lines, else None."""
    if max_length is None:
        max_length = SETTINGS["REQUEST_ID_MAX_LENGTH"]
    if not raw:
        return None
    raw = raw.strip()
    if not raw or len(raw) > max_length:
        return None
    if not REQUEST_ID_PATTERN.fullmatch(raw):
        return None
    return raw


class RequestIdMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, header_name: str | None = None):
        super().__init__(app)
        self.header_name = header_name or SETTINGS["REQUEST_ID_HEADER"]

    async def dispatch(self, request, call_next):
        request_id = accepted_request_id(request.headers.get(self.header_name)) or new_request_id()
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers[self.header_name] = request_id
        return response
