"""Localized views of the catalog, rebuilt whenever messages are reloaded."""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence

from portfolio.catalog import data as catalog
from portfolio.catalog.models import Project, Service, Skill, SocialLink, Stat
from portfolio.ingest.loader import MessageBundle
from portfolio.ingest.validators import ensure_catalog_keys, ensure_consistent_slugs

logger = logging.getLogger(__name__)


class ContentService:
    def __init__(
        self,
        bundle: Optional[MessageBundle] = None,
        projects: Sequence[Project] = catalog.PROJECTS,
        skills: Sequence[Skill] = catalog.SKILLS,
        services: Sequence[Service] = catalog.SERVICES,
        stats: Sequence[Stat] = catalog.STATS,
        social_links: Sequence[SocialLink] = catalog.SOCIAL_LINKS,
    ) -> None:
        self.bundle: Optional[MessageBundle] = None
        self.catalog = {
            "projects": tuple(projects),
            "skills": tuple(skills),
            "services": tuple(services),
            "stats": tuple(stats),
            "social": tuple(social_links),
        }
        self.localized: Dict[str, Dict[str, List[Dict[str, Any]]]] = {}
        if bundle is not None:
            self.reindex(bundle)

    def _entries(self) -> Iterable:
        for entries in self.catalog.values():
            yield from entries

    def reindex(self, bundle: MessageBundle) -> None:
        entries = list(self._entries())
        ensure_consistent_slugs(entries)
        ensure_catalog_keys(entries, bundle.dictionaries)

        self.bundle = bundle
        self.localized.clear()
        for locale in bundle.locales:
            t = bundle.translator(locale)
            self.localized[locale] = {
                "projects": [
                    {
                        "id": p.id,
                        "slug": p.slug,
                        "variant": p.variant,
                        "title": t(p.title_key),
                        "description": t(p.description_key),
                        "category": t(p.category_key) if p.category_key else None,
                        "stat": t(p.stat_key) if p.stat_key else None,
                        "tags": list(p.tags),
                        "image": p.image,
                    }
                    for p in self.catalog["projects"]
                ],
                "skills": [
                    {"slug": s.slug, "name": t(s.name_key), "category": t(s.category_key), "icon": s.icon}
                    for s in self.catalog["skills"]
                ],
                "services": [
                    {"slug": s.slug, "title": t(s.title_key), "description": t(s.description_key), "icon": s.icon}
                    for s in self.catalog["services"]
                ],
                "stats": [
                    {"slug": s.slug, "value": t(s.value_key), "label": t(s.label_key), "icon": s.icon}
                    for s in self.catalog["stats"]
                ],
                "social": [
                    {"slug": s.slug, "name": t(s.name_key), "url": s.url, "icon": s.icon}
                    for s in self.catalog["social"]
                ],
            }
        logger.info("Localized catalog for %s", ", ".join(self.localized))

    def _items(self, locale: str, kind: str) -> List[Dict[str, Any]]:
        return self.localized.get(locale, {}).get(kind, [])

    def projects(self, locale: str) -> List[Dict[str, Any]]:
        return self._items(locale, "projects")

    def skills(self, locale: str) -> List[Dict[str, Any]]:
        return self._items(locale, "skills")

    def services(self, locale: str) -> List[Dict[str, Any]]:
        return self._items(locale, "services")

    def stats(self, locale: str) -> List[Dict[str, Any]]:
        return self._items(locale, "stats")

    def social_links(self, locale: str) -> List[Dict[str, Any]]:
        return self._items(locale, "social")

    def section(self, locale: str, namespace: str) -> Optional[Dict[str, Any]]:
        """Raw sub-tree of ``locale``'s dictionary, e.g. ``hero`` or ``footer``."""
        if self.bundle is None or locale not in self.bundle.dictionaries:
            return None
        node = self.bundle.translator(locale).section(namespace)
        return dict(node) if node is not None else None
