"""
METHOD OVERRIDE
===============
Let plain HTML forms reach PUT/PATCH/DELETE routes.
"""

# FLOW:
# - A POST with ?_method=PUT (or PATCH/DELETE) is dispatched as that method.
# HOW:
# - Rewrites scope["method"] before routing; anything else passes through.

from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware

from Security.security_config import SETTINGS

OVERRIDE_PARAM = "_method"


class MethodOverrideMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, allowed_methods=None):
        super().__init__(app)
        methods = allowed_methods or SETTINGS["METHOD_OVERRIDE_METHODS"]
        self.allowed_methods = {m.upper() for m in methods}

    async def dispatch(self, request, call_next):
        if request.method == "POST":
            override = (request.query_params.get(OVERRIDE_PARAM) or "").strip().upper()
            if override in self.allowed_methods:
                request.scope["method"] = override
        return await call_next(request)
