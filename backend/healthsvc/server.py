"""
Health Check Service — Embedded Server Handle
==============================================

What:  Starts the app under uvicorn on a background thread and hands back an
       explicit handle that owns the listening socket.
How:   The socket is bound in the caller's thread (so bind errors surface
       immediately), then passed to uvicorn.Server.run(sockets=[...]).
       stop() asks uvicorn to exit and joins the thread; when it returns the
       socket is closed and the port can be bound again.
Who:   The test suite and anything else that needs to run the service
       in-process. `python -m healthsvc` uses uvicorn.run() directly.

Usage:
    handle = start_server(port=0)
    httpx.get(f"{handle.url}/health")
    handle.stop()

    with start_server(port=0) as handle:
        ...
"""

import logging
import socket
import threading
import time
from typing import Optional

import uvicorn
from fastapi import FastAPI

from healthsvc.config import settings
from healthsvc.exceptions import ServerStartupError

logger = logging.getLogger(__name__)

STARTUP_TIMEOUT = 10.0
SHUTDOWN_TIMEOUT = 10.0


def _bind_socket(host: str, port: int) -> socket.socket:
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as e:
        sock.close()
        raise ServerStartupError(f"Could not bind {host}:{port}: {e}") from e
    return sock


class ServiceHandle:
    """
    A running service: the uvicorn server, its thread, and its socket.

    Attributes:
        host:  Address the socket is bound to
        port:  Port the socket is bound to (resolved when 0 was requested)
    """

    def __init__(self, server: uvicorn.Server, thread: threading.Thread, sock: socket.socket):
        self._server = server
        self._thread = thread
        self._sock = sock
        self.host, self.port = sock.getsockname()[:2]

    @property
    def url(self) -> str:
        host = "127.0.0.1" if self.host in ("0.0.0.0", "") else self.host
        if ":" in host:
            host = f"[{host}]"
        return f"http://{host}:{self.port}"

    @property
    def running(self) -> bool:
        return self._thread.is_alive()

    def stop(self, timeout: float = SHUTDOWN_TIMEOUT) -> None:
        """
        Gracefully stop the server and release the port.

        Blocks until the server thread has finished, so the socket is closed
        when this returns. Raises TimeoutError if the thread does not finish
        within `timeout` seconds.
        """
        logger.info("Stopping server on %s:%d", self.host, self.port)
        self._server.should_exit = True
        self._thread.join(timeout)
        if self._thread.is_alive():
            raise TimeoutError(
                f"Server on port {self.port} did not shut down within {timeout}s"
            )
        # uvicorn closes it on shutdown; closing again is a no-op
        self._sock.close()
        logger.info("Server on port %d stopped", self.port)

    def __enter__(self) -> "ServiceHandle":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()


def start_server(
    app: Optional[FastAPI] = None,
    host: Optional[str] = None,
    port: Optional[int] = None,
    timeout: float = STARTUP_TIMEOUT,
) -> ServiceHandle:
    """
    Start serving `app` and return once it accepts connections.

    Args:
        app:     Application to serve (default: a fresh create_app())
        host:    Bind address (default: settings.host)
        port:    Port to bind, 0 for any free port (default: settings.port)
        timeout: Seconds to wait for uvicorn to finish starting

    Raises:
        ServerStartupError: the port could not be bound or uvicorn did not
                            start within `timeout`.
    """
    if app is None:
        from healthsvc.main import create_app
        app = create_app()
    host = settings.host if host is None else host
    port = settings.port if port is None else port

    sock = _bind_socket(host, port)
    bound_port = sock.getsockname()[1]
    config = uvicorn.Config(
        app,
        host=host,
        port=bound_port,
        log_config=None,
        server_header=False,
        lifespan="on",
    )
    server = uvicorn.Server(config)
    thread = threading.Thread(
        target=server.run,
        kwargs={"sockets": [sock]},
        name=f"healthsvc-{bound_port}",
        daemon=True,
    )
    thread.start()

    deadline = time.monotonic() + timeout
    while not server.started:
        if not thread.is_alive() or time.monotonic() > deadline:
            server.should_exit = True
            thread.join(timeout)
            sock.close()
            raise ServerStartupError(
                f"Server did not start on {host}:{bound_port} within {timeout}s"
            )
        time.sleep(0.01)

    handle = ServiceHandle(server, thread, sock)
    logger.info("Server listening on %s", handle.url)
    return handle
