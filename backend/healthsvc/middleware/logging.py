"""
Health Check Service — Request Logging Middleware
==================================================

What:  One access-log line for every HTTP request and response.
How:   Measures time around call_next and logs method, path, status and
       duration, tagged with the request ID.
When:  After RequestIDMiddleware (uses request ID for correlation).

Log line:
    GET /does-not-exist 404 0.8ms [a1b2c3d4] from 10.0.0.7

What we log vs what we DON'T log:
    ✅ Log: method, path, status, duration, IP, request ID
    ❌ Don't log: request body, headers
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from healthsvc.middleware.request_id import request_id_var

logger = logging.getLogger("healthsvc.access")

# Probed every few seconds by Kubernetes; logging them drowns everything else
QUIET_PATHS = frozenset({"/health"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status and duration of each request.

    Level by status: 5xx → ERROR, 4xx → WARNING, otherwise INFO.
    Requests to QUIET_PATHS are passed through without a log line.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        rid = request_id_var.get("")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
