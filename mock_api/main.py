"""Application factory."""

from __future__ import annotations

import random

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mock_api.config import Settings, get_settings
from mock_api.infrastructure.store import EntityStore
from mock_api.interfaces.api.exception_handlers import register_exception_handlers
from mock_api.interfaces.api.network_effects import NetworkEffects, NetworkEffectsMiddleware
from mock_api.interfaces.api.routes import register_routes


def create_app(
    settings: Settings | None = None,
    *,
    store: EntityStore | None = None,
    rng: random.Random | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Each application owns its own store and random source, so several
    isolated instances can run side by side.
    """

    settings = settings or get_settings()
    rng = rng or random.Random()

    app = FastAPI(title="Users & Roles Mock API")
    app.state.settings = settings
    app.state.store = store or EntityStore()
    app.state.rng = rng
    app.state.network_effects = NetworkEffects(settings, rng)

    app.add_middleware(NetworkEffectsMiddleware)
    # Outermost middleware: injected 500s carry CORS headers as well.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    register_routes(app)
    return app


__all__ = ["create_app"]
