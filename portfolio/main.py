"""FastAPI application wiring."""
from __future__ import annotations

from fastapi import FastAPI

from portfolio import config
from portfolio.api.routes import catalog, locales, messages
from portfolio.ingest.loader import MessageLoader
from portfolio.services.content import ContentService


def create_app(loader: MessageLoader | None = None, load: bool = True) -> FastAPI:
    app = FastAPI(title="Portfolio Content API")
    loader = loader or MessageLoader(config.MESSAGES_DIR, config.get_registry(), strict=config.STRICT_MESSAGES)
    content_service = ContentService(loader.get_cached_bundle())
    loader.reload_hooks.append(content_service.reindex)
    app.state.loader = loader
    app.state.registry = loader.registry
    app.state.content_service = content_service

    if load and loader.get_cached_bundle() is None:
        loader.load()

    app.include_router(locales.router)
    app.include_router(messages.router)
    app.include_router(catalog.router)
    return app


app = create_app()
