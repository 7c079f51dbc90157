"""
Portfolio Backend — Access Log Middleware
===========================================

What:  One log line per HTTP request: method, path, status, duration,
       request ID and client address.
Why:   Handlers only log failures; this gives the full picture of traffic,
       including uploads served from the static mount.
How:   Times the downstream call and picks the log level from the status:
       5xx → ERROR, 4xx → WARNING, everything else → INFO.

Request bodies are never logged (contact messages contain personal data).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from portfolio_api.middleware.request_id import request_id_var

logger = logging.getLogger("portfolio_api.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request with its status and duration in milliseconds."""

    # Polled by container probes; would drown out real traffic
    SKIPPED_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            request.url.path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": request.url.path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
