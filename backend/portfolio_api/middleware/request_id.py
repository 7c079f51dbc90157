"""
Portfolio Backend — Request ID Middleware
===========================================

What:  Tags each request with a short correlation ID.
Why:   Error handlers log store failures with the ID, and the client gets
       it back in X-Request-ID, so a 500 seen in the browser can be matched
       to its log entry.
How:   Reuses an incoming X-Request-ID header or generates one, keeps it in
       a ContextVar for the duration of the request, and echoes it back.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on the same event loop see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns request IDs and returns them in the X-Request-ID header."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 8 hex chars are plenty to tell requests apart in the log
        rid = request.headers.get("X-Request-ID") or uuid.uuid4().hex[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
