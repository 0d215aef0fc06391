"""
Health Check Service — FastAPI Application Factory
===================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (uvicorn healthsvc.main:app), server.start_server()
       and the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌──────────┐ ┌─────────────────┐  │
    │  │  Req ID      │→│ Logging  │→│ Strip headers   │  │
    │  └──────────────┘ └──────────┘ └─────────────────┘  │
    │                                                     │
    │  Routes (in order):                                 │
    │  ┌──────────────┐ ┌────────────────┐ ┌───────────┐  │
    │  │ GET /health  │ │ GET /error-test│ │ catch-all │  │
    │  └──────────────┘ └────────────────┘ └───────────┘  │
    │                                                     │
    │  Exception Handlers (error stage):                  │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ NotFound→404 │ HandlerFailure→500 │ Exc→500  │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from healthsvc import __version__
from healthsvc.config import settings
from healthsvc.exceptions import HandlerFailureError, NotFoundError
from healthsvc.middleware import (
    REQUEST_ID_HEADER,
    RequestIDMiddleware,
    RequestLoggingMiddleware,
    StripFingerprintHeadersMiddleware,
    request_id_var,
)
from healthsvc.routes import include_routes

logger = logging.getLogger(__name__)

NOT_FOUND_BODY = {"error": "Not Found"}
INTERNAL_ERROR_BODY = {"error": "Internal Server Error"}


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout, which the container runtime captures.
    """
    level = level or settings.log_level
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # healthsvc.access already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Configure logging on startup; log startup and shutdown."""
    setup_logging()
    logger.info("Health service %s starting up", __version__)
    logger.info("Configured for http://%s:%d", settings.host, settings.port)

    yield

    logger.info("Health service shutting down")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers (error stage)
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register the handlers that turn raised errors into responses.

    Handler hierarchy:
        NotFoundError                 → 404 {"error": "Not Found"}
        HTTPException 404 / 405       → 404 {"error": "Not Found"}
        HTTPException (other)         → status as raised, {"error": detail}
        HandlerFailureError           → 500 {"error": "Internal Server Error"}
        Exception (fallback)          → 500 {"error": "Internal Server Error"}

    Security: response bodies are fixed strings. The exception message and
    stack trace go to the log only.
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        logger.debug("[%s] %s", rid, exc.message)
        return JSONResponse(status_code=404, content=NOT_FOUND_BODY)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        # An unsupported method on a known path is reported as not found
        if exc.status_code in (404, 405):
            return JSONResponse(status_code=404, content=NOT_FOUND_BODY)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(HandlerFailureError)
    async def handle_handler_failure(request: Request, exc: HandlerFailureError):
        rid = request_id_var.get("")
        logger.error(
            "[%s] Handler failure on %s %s: %s | Context: %s",
            rid,
            request.method,
            request.url.path,
            exc.message,
            exc.context,
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all for errors no other handler claimed.

        Starlette runs this from its outermost error middleware, which
        re-raises after the response is sent so the server can log it too.
        It runs outside RequestIDMiddleware, whose ContextVar is already
        reset by then; request.state lives in the scope and still has the ID.
        """
        rid = getattr(request.state, "request_id", "")
        logger.error(
            "[%s] Unexpected error on %s %s: %s",
            rid,
            request.method,
            request.url.path,
            str(exc),
            exc_info=exc,
        )
        headers = {REQUEST_ID_HEADER: rid} if rid else None
        return JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY, headers=headers)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Interactive docs (/docs, /redoc, /openapi.json) are disabled: the only
    routes are /health, /error-test and the catch-all.
    """
    app = FastAPI(
        title="Health Check Service",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → StripFingerprintHeaders
    app.add_middleware(StripFingerprintHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes (catch-all last, checked) ─────────────────────────
    include_routes(app)

    return app


# uvicorn expects `healthsvc.main:app` to be importable
app = create_app()
