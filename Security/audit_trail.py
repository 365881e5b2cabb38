"""
AUDIT TRAIL
===========
Lightweight audit logging helper.
"""

# FLOW:
# - Call audit() on contact writes to emit structured audit events.
# HOW:
# - Request context is bound per request through a context variable.

from __future__ import annotations

import contextvars

from Security.activity_logging import get_file_logger

logger = get_file_logger("contacts.audit", "audit.log")

_audit_ctx: contextvars.ContextVar[dict[str, str] | None] = contextvars.ContextVar("audit_ctx", default=None)


def _client_ip(request) -> str:
    xff = (request.headers.get("x-forwarded-for") or "").strip()
    if xff:
        return xff.split(",")[0].strip()
    if request.client and request.client.host:
        return request.client.host
    return "-"


def set_audit_request_context(request):
    request_id = getattr(request.state, "request_id", "")
    payload = {
        "ip": _client_ip(request),
        "request_id": str(request_id or "").strip(),
        "path": str(request.url.path or "").strip(),
        "method": str(request.method or "").strip(),
    }
    return _audit_ctx.set(payload)


def clear_audit_request_context(token) -> None:
    _audit_ctx.reset(token)


def audit(event: str, contact_id: int | None = None, details: str | None = None) -> None:
    ctx = _audit_ctx.get() or {}
    logger.info(
        "event=%s contact_id=%s ip=%s request_id=%s method=%s path=%s details=%s",
        event,
        contact_id,
        ctx.get("ip", "-"),
        ctx.get("request_id", ""),
        ctx.get("method", ""),
        ctx.get("path", ""),
        details or "",
    )
