"""
Health Check Service — Route Registration Order Tests
======================================================

What:  include_routes() mounts the catch-all last and refuses any other order.
"""

import pytest
from fastapi import FastAPI
from fastapi.routing import APIRoute

from healthsvc.routes import ensure_catch_all_last, fallback, include_routes


def _bare_app() -> FastAPI:
    return FastAPI(openapi_url=None, docs_url=None, redoc_url=None)


class TestRouteOrder:

    def test_catch_all_is_last(self, app):
        assert app.router.routes[-1].name == fallback.CATCH_ALL_NAME

    def test_catch_all_is_a_concrete_route(self, app):
        """The last entry is a real APIRoute, however included routers are stored."""
        last = app.router.routes[-1]
        assert isinstance(last, APIRoute)
        assert last.path == fallback.CATCH_ALL_PATH
        assert set(fallback.ALL_METHODS) <= last.methods

    def test_include_routes_on_fresh_app(self):
        app = _bare_app()
        include_routes(app)
        ensure_catch_all_last(app)

    def test_route_after_catch_all_is_rejected(self, app):
        @app.get("/late")
        async def late():
            return "too late"

        with pytest.raises(RuntimeError, match="after all other routes"):
            ensure_catch_all_last(app)

    def test_empty_app_is_rejected(self):
        with pytest.raises(RuntimeError):
            ensure_catch_all_last(_bare_app())

    def test_catch_all_registered_twice_is_rejected(self):
        app = _bare_app()
        include_routes(app)
        with pytest.raises(RuntimeError, match="exactly once"):
            include_routes(app)
