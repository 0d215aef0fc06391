"""
Health Check Service — Catch-all Route
=======================================

What:  Matches every method on every path and raises NotFoundError.
How:   A single `/{path:path}` endpoint registered for all methods. Starlette
       prefers a full (path + method) match over a path-only match, so
       `POST /health` lands here instead of producing 405.

Mounted directly on the app (not through an APIRouter) so it is a real
route at the end of `app.router.routes`; routes.include_routes() checks that.
"""

from fastapi import Request

from healthsvc.exceptions import NotFoundError

CATCH_ALL_PATH = "/{path:path}"

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

CATCH_ALL_NAME = "catch_all"


async def catch_all(request: Request, path: str) -> None:
    raise NotFoundError(method=request.method, path=request.url.path)
