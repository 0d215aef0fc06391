"""
Health Check Service — Custom Exception Hierarchy
==================================================

What:  Application-specific exceptions for the two non-success outcomes.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return the fixed JSON error bodies.
Who:   Raised by route handlers; caught by global handlers.

Exception Hierarchy:
    ServiceError (base)
    ├── NotFoundError        → 404 Not Found
    └── HandlerFailureError  → 500 Internal Server Error

    ServerStartupError       → raised by server.start_server(), never over HTTP

Security:
    Neither `message` nor `context` is ever written to a response body.
    Both are logged server-side only.
"""

from typing import Any, Dict, Optional


class ServiceError(Exception):
    """
    Base exception for all errors raised while handling a request.

    Attributes:
        message:  Human-readable description (logged, not returned)
        context:  Additional debug info (logged, not returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(ServiceError):
    """
    Raised when no registered route matches the request.

    Raised by the catch-all route, so unknown paths and known paths with an
    unsupported method (e.g. POST /health) end up in the same handler.
    """

    def __init__(
        self,
        method: Optional[str] = None,
        path: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = "No route matches the request"
        if method and path:
            message = f"No route matches {method} {path}"
        ctx = context or {}
        if method:
            ctx["method"] = method
        if path:
            ctx["path"] = path
        super().__init__(message=message, context=ctx)


class HandlerFailureError(ServiceError):
    """
    Raised when a matched handler cannot produce a response.

    HTTP: 500 Internal Server Error with a fixed body, whatever the message.
    """

    def __init__(
        self,
        message: str = "Handler failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ServerStartupError(RuntimeError):
    """Raised when start_server() cannot bring the listener up."""
