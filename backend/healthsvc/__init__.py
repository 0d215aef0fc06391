"""
Health Check Service — Application Package Initializer
=======================================================

What: Marks the `healthsvc` directory as a Python package.
Who:  Imported by uvicorn (`healthsvc.main:app`), the test suite, and the
      `healthsvc` console script.

Architecture Note:
    The service is a single FastAPI application with three layers:

    ┌─────────────────────────────────────┐
    │        Middleware (cross-cutting)   │  ← request ID, access log, headers
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← /health, /error-test, catch-all
    ├─────────────────────────────────────┤
    │     Exception Handlers (Error stage)│  ← 404 / 500 normalization
    └─────────────────────────────────────┘

    There is no service or persistence layer: every route answers on its own.
"""

__version__ = "1.0.0"
