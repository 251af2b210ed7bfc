"""API schema definitions."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class LocaleInfo(BaseModel):
    code: str
    name: str
    flag: str


class LocalesResponse(BaseModel):
    default: str
    locales: List[LocaleInfo]


class DetectQuery(BaseModel):
    lang: Optional[str] = Field(default=None, description="Explicit preference tried before Accept-Language")


class DetectResponse(BaseModel):
    locale: str
    preferences: List[str] = Field(default_factory=list)


class MessageResponse(BaseModel):
    locale: str
    key: str
    text: str
