"""
Health Check Service — Fingerprint Header Stripping
====================================================

What:  Removes headers that identify the server software from every response.
How:   Deletes each name in FINGERPRINT_HEADERS from the outgoing response.

uvicorn's own `server: uvicorn` header is written at the transport layer and
is switched off separately with `server_header=False` (see server.py and
__main__.py); this middleware covers anything set from inside the app.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

FINGERPRINT_HEADERS = ("X-Powered-By", "Server")


class StripFingerprintHeadersMiddleware(BaseHTTPMiddleware):
    """Drops X-Powered-By / Server from responses produced by the app."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for name in FINGERPRINT_HEADERS:
            if name in response.headers:
                del response.headers[name]
        return response
