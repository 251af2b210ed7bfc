"""Locale listing and detection routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from portfolio.api.deps import get_registry
from portfolio.api.schemas import DetectQuery, DetectResponse, LocalesResponse
from portfolio.i18n.negotiation import parse_accept_language, resolve_locale

router = APIRouter()


@router.get("/locales", response_model=LocalesResponse)
def list_locales(registry=Depends(get_registry)):
    return {
        "default": registry.default,
        "locales": [{"code": loc.code, "name": loc.name, "flag": loc.flag} for loc in registry],
    }


@router.get("/locale/detect", response_model=DetectResponse)
def detect_locale(request: Request, query: DetectQuery = Depends(), registry=Depends(get_registry)):
    preferences = [query.lang] if query.lang else []
    preferences.extend(parse_accept_language(request.headers.get("accept-language")))
    locale = resolve_locale(preferences, registry.codes, registry.default)
    return {"locale": locale, "preferences": preferences}
