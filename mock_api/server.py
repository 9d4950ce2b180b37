"""Run the API on a background thread and control it from the host process."""

from __future__ import annotations

import logging
import random
import threading
import time
from dataclasses import dataclass

import uvicorn

from mock_api.config import Settings, get_settings
from mock_api.infrastructure.store import EntityStore
from mock_api.main import create_app

logger = logging.getLogger(__name__)

STARTUP_TIMEOUT_SECONDS = 10.0


@dataclass
class ServerHandle:
    """Handle returned by :func:`start_server`."""

    server: uvicorn.Server
    thread: threading.Thread
    store: EntityStore
    host: str
    port: int

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def reset(self) -> None:
        """Restore users and roles to the seed data."""

        self.store.reset()

    def stop(self) -> None:
        """Close the listener and wait for the server thread to finish."""

        self.server.should_exit = True
        self.thread.join()
        logger.info("Server on %s stopped", self.url)


def start_server(
    settings: Settings | None = None,
    *,
    store: EntityStore | None = None,
    rng: random.Random | None = None,
    host: str = "127.0.0.1",
) -> ServerHandle:
    """Start serving on ``settings.port`` and return once the socket is listening.

    A port of ``0`` lets the operating system pick a free port; the bound
    port is available on the returned handle.
    """

    settings = settings or get_settings()
    store = store or EntityStore()
    app = create_app(settings, store=store, rng=rng)

    config = uvicorn.Config(app, host=host, port=settings.port, log_level="warning")
    server = uvicorn.Server(config)
    thread = threading.Thread(target=server.run, name="mock-api-server", daemon=True)
    thread.start()

    deadline = time.monotonic() + STARTUP_TIMEOUT_SECONDS
    while not server.started:
        if not thread.is_alive():
            raise RuntimeError(f"Server failed to start on {host}:{settings.port}")
        if time.monotonic() > deadline:
            server.should_exit = True
            raise RuntimeError(f"Server did not start within {STARTUP_TIMEOUT_SECONDS}s")
        time.sleep(0.01)

    port = server.servers[0].sockets[0].getsockname()[1]
    handle = ServerHandle(server=server, thread=thread, store=store, host=host, port=port)
    logger.info("Serving on %s (speed=%s)", handle.url, settings.speed.value)
    return handle


__all__ = ["ServerHandle", "start_server"]
