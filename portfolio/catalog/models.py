"""Structural catalog records; display text is referenced by translation key only."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

PROJECT_VARIANTS = ("featured", "small", "icon", "wide")


@dataclass(frozen=True)
class Project:
    # projects.items.<slug>.<field>
    slug_segment: ClassVar[int] = 2

    id: int
    slug: str
    title_key: str
    description_key: str
    variant: str
    tags: Tuple[str, ...] = ()
    image: Optional[str] = None
    category_key: Optional[str] = None
    stat_key: Optional[str] = None

    def __post_init__(self) -> None:
        if self.variant not in PROJECT_VARIANTS:
            raise ValueError(f"invalid_variant:{self.slug}:{self.variant}")

    def translation_keys(self) -> Tuple[str, ...]:
        keys = (self.title_key, self.description_key, self.category_key, self.stat_key)
        return tuple(key for key in keys if key)

    def slug_keys(self) -> Tuple[str, ...]:
        return self.translation_keys()


@dataclass(frozen=True)
class Skill:
    # skills.items.<slug>
    slug_segment: ClassVar[int] = 2

    slug: str
    name_key: str
    icon: str
    category_key: str

    def translation_keys(self) -> Tuple[str, ...]:
        return (self.name_key, self.category_key)

    def slug_keys(self) -> Tuple[str, ...]:
        # category keys are shared between skills
        return (self.name_key,)


@dataclass(frozen=True)
class Service:
    # services.cards.<slug>.<field>
    slug_segment: ClassVar[int] = 2

    slug: str
    title_key: str
    description_key: str
    icon: str

    def translation_keys(self) -> Tuple[str, ...]:
        return (self.title_key, self.description_key)

    def slug_keys(self) -> Tuple[str, ...]:
        return self.translation_keys()


@dataclass(frozen=True)
class Stat:
    # stats.<slug>.<field>
    slug_segment: ClassVar[int] = 1

    slug: str
    value_key: str
    label_key: str
    icon: str

    def translation_keys(self) -> Tuple[str, ...]:
        return (self.value_key, self.label_key)

    def slug_keys(self) -> Tuple[str, ...]:
        return self.translation_keys()


@dataclass(frozen=True)
class SocialLink:
    # social.items.<slug>.<field>
    slug_segment: ClassVar[int] = 2

    slug: str
    name_key: str
    url: str
    icon: str

    def translation_keys(self) -> Tuple[str, ...]:
        return (self.name_key,)

    def slug_keys(self) -> Tuple[str, ...]:
        return self.translation_keys()
