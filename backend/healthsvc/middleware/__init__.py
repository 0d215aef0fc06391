# Middleware package init
"""
Health Check Service — Middleware Package
==========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [Strip Headers] → Route Handler

    1. Request ID: Generate correlation ID for logging and tracing
    2. Logging: Log request details with the generated request ID
    3. Strip Headers: Remove framework-identifying headers from the response

    The order is reversed for responses:
    Response ← [Request ID] ← [Logging] ← [Strip Headers] ← Route Handler
"""

from healthsvc.middleware.headers import StripFingerprintHeadersMiddleware
from healthsvc.middleware.logging import RequestLoggingMiddleware
from healthsvc.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIDMiddleware,
    request_id_var,
)

__all__ = [
    "REQUEST_ID_HEADER",
    "RequestIDMiddleware",
    "RequestLoggingMiddleware",
    "StripFingerprintHeadersMiddleware",
    "request_id_var",
]
