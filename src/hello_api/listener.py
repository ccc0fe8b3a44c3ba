"""
HTTP listener built on uvicorn.

The listening socket is bound before uvicorn starts so that an occupied
port surfaces as ``ListenerStartupError`` instead of a bare process exit.
"""

import socket
import threading
import time

import uvicorn
from fastapi import FastAPI

from hello_api.config import Settings
from hello_api.core.logging import logger
from hello_api.core.uvicorn_filters import install_health_check_filter


class ListenerStartupError(RuntimeError):
    """The listener could not bind its port or failed to start serving."""


class _Server(uvicorn.Server):
    """uvicorn server that announces the port once it is accepting connections."""

    def __init__(self, config: uvicorn.Config, port: int) -> None:
        super().__init__(config)
        self.port = port
        self.ready = threading.Event()

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            logger.info(f"Hello World app listening on port {self.port}")
            self.ready.set()


class Listener:
    """
    Serves a FastAPI application on ``settings.host:settings.port``.

    ``serve`` blocks the calling thread until shutdown. ``start`` and
    ``stop`` run the same server on a background thread, for tests and
    embedding.

    Example:
        listener = Listener(create_app(settings), settings)
        listener.serve()
    """

    def __init__(self, app: FastAPI, settings: Settings) -> None:
        self.app = app
        self.settings = settings
        self._socket: socket.socket | None = None
        self._server: _Server | None = None
        self._thread: threading.Thread | None = None

    @property
    def port(self) -> int:
        """Port actually bound, which differs from settings when 0 was requested."""
        if self._socket is None:
            return self.settings.port
        return self._socket.getsockname()[1]

    @property
    def started(self) -> bool:
        return self._server is not None and self._server.ready.is_set()

    def bind(self) -> socket.socket:
        """
        Bind the listening socket.

        Returns:
            The bound socket

        Raises:
            ListenerStartupError: If the address is unavailable
        """
        host = self.settings.host
        family = socket.AF_INET6 if ":" in host else socket.AF_INET
        sock = socket.socket(family, socket.SOCK_STREAM)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((host, self.settings.port))
        except OSError as exc:
            sock.close()
            raise ListenerStartupError(
                f"Cannot bind {host}:{self.settings.port}: {exc.strerror or exc}"
            ) from exc

        self._socket = sock
        return sock

    def _build_server(self, sock: socket.socket) -> _Server:
        install_health_check_filter()
        config = uvicorn.Config(
            self.app,
            host=self.settings.host,
            port=sock.getsockname()[1],
            log_config=None,
            log_level=self.settings.log_level.lower(),
            access_log=True,
            server_header=False,
            lifespan="on",
        )
        return _Server(config, port=sock.getsockname()[1])

    def serve(self) -> None:
        """
        Bind and serve until interrupted (Ctrl-C or SIGTERM).

        Raises:
            ListenerStartupError: If the port is unavailable
        """
        sock = self.bind()
        self._server = self._build_server(sock)
        try:
            self._server.run(sockets=[sock])
        finally:
            sock.close()
            self._socket = None

    def start(self, timeout: float = 5.0) -> None:
        """
        Bind and serve on a daemon thread; returns once connections are accepted.

        Args:
            timeout: Seconds to wait for the server to come up

        Raises:
            ListenerStartupError: If the port is unavailable or startup times out
        """
        sock = self.bind()
        self._server = self._build_server(sock)
        self._thread = threading.Thread(
            target=self._server.run,
            kwargs={"sockets": [sock]},
            name="hello-api-listener",
            daemon=True,
        )
        self._thread.start()

        deadline = time.monotonic() + timeout
        while not self._server.ready.wait(0.01):
            if not self._thread.is_alive() or time.monotonic() > deadline:
                self.stop()
                raise ListenerStartupError("Listener did not start serving in time")

    def stop(self, timeout: float = 5.0) -> None:
        """
        Stop accepting connections, let in-flight requests finish, release the port.

        Args:
            timeout: Seconds to wait for the serving thread to finish
        """
        if self._server is not None:
            self._server.should_exit = True
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        self._server = None
        if self._socket is not None:
            self._socket.close()
            self._socket = None
        logger.info("Listener stopped")
