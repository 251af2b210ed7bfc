"""Localized catalog routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from portfolio.api.deps import get_content_service, get_locale

router = APIRouter()


@router.get("/{locale}/projects")
def list_projects(locale: str = Depends(get_locale), service=Depends(get_content_service)):
    return {"items": service.projects(locale)}


@router.get("/{locale}/skills")
def list_skills(locale: str = Depends(get_locale), service=Depends(get_content_service)):
    return {"items": service.skills(locale)}


@router.get("/{locale}/services")
def list_services(locale: str = Depends(get_locale), service=Depends(get_content_service)):
    return {"items": service.services(locale)}


@router.get("/{locale}/stats")
def list_stats(locale: str = Depends(get_locale), service=Depends(get_content_service)):
    return {"items": service.stats(locale)}


@router.get("/{locale}/social")
def list_social_links(locale: str = Depends(get_locale), service=Depends(get_content_service)):
    return {"items": service.social_links(locale)}
