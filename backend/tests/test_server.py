"""
Health Check Service — Live Server Tests
=========================================

What:  start_server() / ServiceHandle.stop() against a real socket.
How:   Binds an ephemeral port, talks to it over HTTP with httpx, stops the
       server, then binds the same port again to prove it was released.
"""

import socket

import httpx
import pytest

from healthsvc.exceptions import ServerStartupError
from healthsvc.server import start_server


def _can_bind(port: int) -> bool:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind(("127.0.0.1", port))
        sock.listen(1)
        return True
    except OSError:
        return False
    finally:
        sock.close()


@pytest.fixture
def live_server():
    handle = start_server(host="127.0.0.1", port=0)
    yield handle
    if handle.running:
        handle.stop()


class TestLiveServer:

    def test_scenarios_over_http(self, live_server):
        with httpx.Client(base_url=live_server.url) as client:
            health = client.get("/health")
            missing = client.get("/does-not-exist")
            failing = client.get("/error-test")
            posted = client.post("/health", json={"invalid": "data"})

        assert (health.status_code, health.text) == (200, "OK")
        assert (missing.status_code, missing.json()) == (404, {"error": "Not Found"})
        assert (failing.status_code, failing.json()) == (500, {"error": "Internal Server Error"})
        assert (posted.status_code, posted.json()) == (404, {"error": "Not Found"})

    def test_no_server_header(self, live_server):
        res = httpx.get(f"{live_server.url}/health")
        assert "server" not in res.headers
        assert "x-powered-by" not in res.headers

    def test_port_released_after_stop(self, live_server):
        port = live_server.port
        httpx.get(f"{live_server.url}/health")

        live_server.stop()

        assert not live_server.running
        assert _can_bind(port)

    def test_restart_on_same_port(self, live_server):
        port = live_server.port
        live_server.stop()

        with start_server(host="127.0.0.1", port=port) as again:
            assert again.port == port
            assert httpx.get(f"{again.url}/health").text == "OK"


class TestStartupFailure:

    def test_port_in_use(self, live_server):
        with pytest.raises(ServerStartupError, match="Could not bind"):
            start_server(host="127.0.0.1", port=live_server.port)
