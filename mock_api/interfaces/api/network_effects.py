"""Simulated network conditions applied to every request.

Each request is delayed according to the configured :class:`ServerSpeed`
and may be answered with an injected ``500`` instead of reaching a route.
Both decisions are drawn up front from an injectable random source, so a
faulted request never touches the store.
"""

from __future__ import annotations

import logging
import random
from typing import Callable

import anyio
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from mock_api.config import ServerSpeed, Settings
from mock_api.domain.exceptions import SERVER_ERROR_MESSAGE

logger = logging.getLogger(__name__)


class NetworkEffects:
    """Draw per-request latency and fault outcomes from ``settings``."""

    def __init__(self, settings: Settings, rng: random.Random | None = None) -> None:
        self.settings = settings
        self._rng = rng or random.Random()

    @property
    def request_logging(self) -> bool:
        return self.settings.request_logging

    def latency_window(self) -> tuple[int, int]:
        """Return the ``[min, max)`` latency window in milliseconds."""

        speed = self.settings.speed
        if speed is ServerSpeed.SLOW:
            return self.settings.slow_latency_min_ms, self.settings.slow_latency_max_ms
        if speed is ServerSpeed.FAST:
            return self.settings.fast_latency_min_ms, self.settings.fast_latency_max_ms
        return 0, 0

    def latency_ms(self) -> int:
        low, high = self.latency_window()
        if high <= low:
            return low
        return self._rng.randrange(low, high)

    def should_fail(self) -> bool:
        return self._rng.random() < self.settings.chance_of_server_error

    async def delay(self, latency_ms: int) -> None:
        if latency_ms > 0:
            await anyio.sleep(latency_ms / 1000)


def describe_request(method: str, path: str, latency_ms: int, failed: bool) -> str:
    """Return the one-line request log, e.g. ``GET /users (+612ms) (Server Error)``."""

    latency = f" (+{latency_ms}ms)" if latency_ms else ""
    fault = " (Server Error)" if failed else ""
    return f"{method} {path}{latency}{fault}"


def server_error_response() -> JSONResponse:
    return JSONResponse(status_code=500, content={"message": SERVER_ERROR_MESSAGE})


class NetworkEffectsMiddleware(BaseHTTPMiddleware):
    """Delay every request and short-circuit some of them with a ``500``.

    The :class:`NetworkEffects` instance is read from ``app.state`` on each
    request so it can be swapped while the application is running.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        effects: NetworkEffects = request.app.state.network_effects
        latency_ms = effects.latency_ms()
        failed = effects.should_fail()

        if effects.request_logging:
            logger.info(describe_request(request.method, request.url.path, latency_ms, failed))

        await effects.delay(latency_ms)

        if failed:
            return server_error_response()
        return await call_next(request)


__all__ = [
    "NetworkEffects",
    "NetworkEffectsMiddleware",
    "describe_request",
    "server_error_response",
]
