"""Translation routes."""
from __future__ import annotations

import re
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request

from portfolio.api.deps import get_bundle, get_content_service, get_locale
from portfolio.api.schemas import MessageResponse

router = APIRouter()

_INTEGER = re.compile(r"-?\d+")


def _query_values(request: Request) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for name, value in request.query_params.items():
        values[name] = int(value) if _INTEGER.fullmatch(value) else value
    return values


@router.get("/{locale}/messages/{key:path}", response_model=MessageResponse)
def get_message(key: str, request: Request, locale: str = Depends(get_locale), bundle=Depends(get_bundle)):
    text = bundle.translate(locale, key, _query_values(request))
    return {"locale": locale, "key": key, "text": text}


@router.get("/{locale}/sections/{namespace:path}")
def get_section(namespace: str, locale: str = Depends(get_locale), service=Depends(get_content_service)):
    section = service.section(locale, namespace)
    if section is None:
        raise HTTPException(status_code=404, detail="section_not_found")
    return section
