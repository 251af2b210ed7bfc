"""Request dependencies shared by the content routes."""
from __future__ import annotations

from fastapi import HTTPException, Request

from portfolio.i18n.locales import LocaleRegistry
from portfolio.ingest.loader import MessageBundle


def get_registry(request: Request) -> LocaleRegistry:
    registry = getattr(request.app.state, "registry", None)
    if registry is None:
        raise HTTPException(status_code=500, detail="registry_unavailable")
    return registry


def get_locale(locale: str, request: Request) -> str:
    code = locale.lower()
    if code not in get_registry(request):
        raise HTTPException(status_code=404, detail="locale_not_supported")
    return code


def get_bundle(request: Request) -> MessageBundle:
    loader = getattr(request.app.state, "loader", None)
    if not loader or not loader.get_cached_bundle():
        raise HTTPException(status_code=503, detail="messages_not_loaded")
    return loader.get_cached_bundle()


def get_content_service(request: Request):
    get_bundle(request)
    service = getattr(request.app.state, "content_service", None)
    if not service:
        raise HTTPException(status_code=500, detail="content_service_unavailable")
    return service
