"""HTTP transport lifecycle: bind, serve and graceful shutdown."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import socket
from typing import TYPE_CHECKING

import uvicorn

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = logging.getLogger(__name__)

STARTUP_POLL_INTERVAL_SECONDS = 0.01


class TransportError(Exception):
    """The HTTP listener could not be started or failed while serving."""


class ServerRunner:
    """Owns the listening socket and the uvicorn server serving the app.

    The socket is bound here rather than by uvicorn so bind failures surface
    to the caller of :meth:`start` as :class:`TransportError`.
    """

    def __init__(
        self,
        app: FastAPI,
        *,
        host: str,
        port: int,
        shutdown_timeout: float = 5.0,
    ) -> None:
        self._app = app
        self._host = host
        self._port = port
        self._shutdown_timeout = shutdown_timeout
        self._server: uvicorn.Server | None = None
        self._socket: socket.socket | None = None
        self._task: asyncio.Task[None] | None = None

    @property
    def app(self) -> FastAPI:
        return self._app

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        """Bound port (resolves port 0 once started)."""
        if self._socket is not None:
            return self._socket.getsockname()[1]
        return self._port

    @property
    def base_url(self) -> str:
        return f"http://{self._host}:{self.port}/"

    @property
    def is_running(self) -> bool:
        return (
            self._task is not None
            and not self._task.done()
            and self._server is not None
            and self._server.started
        )

    def _bind(self) -> socket.socket:
        try:
            sock = socket.create_server((self._host, self._port))
        except OSError as e:
            logger.error(
                "http_server_bind_failed",
                extra={"host": self._host, "port": self._port},
            )
            raise TransportError(
                f"Failed to bind HTTP server to {self._host}:{self._port}: {e}"
            ) from e
        sock.setblocking(False)
        return sock

    async def start(self) -> None:
        """Bind the socket and start serving in a background task.

        Returns once the server accepts connections.

        Raises:
            TransportError: If already running, or if binding or startup fails.
        """
        if self._task is not None:
            raise TransportError("HTTP server is already running")

        sock = self._bind()
        config = uvicorn.Config(
            self._app,
            log_level="info",
            log_config=None,  # Use shared logging config, not uvicorn's
            timeout_graceful_shutdown=max(1, int(self._shutdown_timeout)),
        )
        server = uvicorn.Server(config)
        task = asyncio.create_task(server.serve(sockets=[sock]))

        while not server.started:
            if task.done():
                sock.close()
                error = task.exception() if not task.cancelled() else None
                raise TransportError("HTTP server failed to start") from error
            await asyncio.sleep(STARTUP_POLL_INTERVAL_SECONDS)

        self._socket = sock
        self._server = server
        self._task = task
        logger.info("http_server_started", extra={"url": self.base_url})

    async def stop(self) -> None:
        """Stop accepting connections and wait for in-flight requests.

        Waits up to ``shutdown_timeout`` seconds, then forces the server down.
        A no-op when not running.
        """
        if self._task is None or self._server is None:
            return

        logger.info("http_server_stopping")
        server, task = self._server, self._task
        server.should_exit = True
        try:
            if not task.done():
                await asyncio.wait_for(
                    asyncio.shield(task), timeout=self._shutdown_timeout + 1
                )
        except TimeoutError:
            logger.warning("http_server_force_shutdown")
            server.force_exit = True
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
        finally:
            if self._socket is not None:
                self._socket.close()
            self._socket = None
            self._server = None
            self._task = None

        logger.info("http_server_stopped")

    async def run_until_stopped(self) -> None:
        """Wait for a started server to exit (e.g. on SIGINT/SIGTERM)."""
        if self._task is None:
            raise TransportError("HTTP server is not running")
        try:
            await asyncio.shield(self._task)
        finally:
            await self.stop()
