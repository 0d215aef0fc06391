# Routes package init
"""
Health Check Service — API Routes Package
==========================================

Route Inventory:
    - health.py:       GET  /health        (always 200 OK)
    - diagnostics.py:  GET  /error-test    (always fails → 500)
    - fallback.py:     ANY  /{path:path}   (catch-all → 404)

Registration order is part of the contract: Starlette tries routes in the
order they were added, so the catch-all must come after every specific
route. include_routes() is the only place routes are mounted. The catch-all
is added with app.add_api_route() so it is always a concrete route at the
end of app.router.routes, whatever FastAPI does with included routers.
"""

from fastapi import FastAPI
from starlette.routing import BaseRoute

from healthsvc.routes import diagnostics, fallback, health

# Specific routers, in registration order. The catch-all is appended last.
SERVICE_ROUTERS = (health.router, diagnostics.router)


def _is_catch_all(route: BaseRoute) -> bool:
    return getattr(route, "name", None) == fallback.CATCH_ALL_NAME


def ensure_catch_all_last(app: FastAPI) -> None:
    """
    Raise RuntimeError unless the catch-all is the app's final route.

    Anything registered after it would be unreachable.
    """
    routes = app.router.routes
    if not routes or not _is_catch_all(routes[-1]):
        raise RuntimeError(
            "The catch-all route must be registered after all other routes"
        )
    if sum(1 for route in routes if _is_catch_all(route)) != 1:
        raise RuntimeError("The catch-all route must be registered exactly once")


def include_routes(app: FastAPI) -> None:
    """Mount the service routers, then the catch-all, then verify the order."""
    for router in SERVICE_ROUTERS:
        app.include_router(router)
    app.add_api_route(
        fallback.CATCH_ALL_PATH,
        fallback.catch_all,
        methods=fallback.ALL_METHODS,
        name=fallback.CATCH_ALL_NAME,
        include_in_schema=False,
    )
    ensure_catch_all_last(app)
