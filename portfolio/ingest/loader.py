"""Orchestration for loading locale JSON bundles into the application cache."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional

import pandas as pd

from portfolio.i18n.locales import LocaleRegistry
from portfolio.i18n.messages import Translator, translate
from portfolio.ingest.coverage import coverage_frame, find_incomplete
from portfolio.ingest.validators import CompletenessError, SchemaValidationError, ensure_string_leaves

logger = logging.getLogger(__name__)


class MissingLocaleError(RuntimeError):
    """Raised when a supported locale has no Message Dictionary."""


class UnsupportedLocaleError(KeyError):
    """Raised when a translator is requested for a locale outside the registry."""


@dataclass
class MessageBundle:
    dictionaries: Dict[str, Dict[str, Any]]
    default_locale: str
    coverage: pd.DataFrame = field(default_factory=pd.DataFrame)
    incomplete: pd.DataFrame = field(default_factory=pd.DataFrame)

    @property
    def locales(self) -> List[str]:
        return list(self.dictionaries)

    def translator(self, locale: str) -> Translator:
        if locale not in self.dictionaries:
            raise UnsupportedLocaleError(locale)
        return Translator(locale, self.dictionaries[locale])

    def translate(self, locale: str, key: str, values: Optional[Mapping[str, Any]] = None) -> str:
        return translate(self.dictionaries[locale], key, values)


class MessageLoader:
    """Read, validate and cache one Message Dictionary per supported locale."""

    def __init__(
        self,
        messages_dir: Path,
        registry: LocaleRegistry,
        strict: bool = True,
        reload_hooks: Optional[List[Callable[[MessageBundle], None]]] = None,
    ) -> None:
        self.messages_dir = Path(messages_dir)
        self.registry = registry
        self.strict = strict
        self.reload_hooks = reload_hooks or []
        self.cache: Optional[MessageBundle] = None

    def _read(self, code: str) -> Dict[str, Any]:
        path = self.messages_dir / f"{code}.json"
        if not path.exists():
            raise MissingLocaleError(f"missing_locale:{code}")
        with path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, dict):
            raise SchemaValidationError(f"invalid_root:{code}")
        return data

    def _validate(self, dictionaries: Mapping[str, Dict[str, Any]]) -> MessageBundle:
        for code in self.registry.codes:
            if code not in dictionaries:
                raise MissingLocaleError(f"missing_locale:{code}")
        extra = sorted(set(dictionaries) - set(self.registry.codes))
        if extra:
            logger.warning("Ignoring dictionaries for unsupported locales: %s", ", ".join(extra))

        selected = {code: dictionaries[code] for code in self.registry.codes}
        for code, tree in selected.items():
            if not isinstance(tree, Mapping):
                raise SchemaValidationError(f"invalid_root:{code}")
            ensure_string_leaves(tree, code)

        coverage = coverage_frame(selected)
        incomplete = find_incomplete(coverage)
        if not incomplete.empty:
            keys = sorted(str(key) for key in incomplete.index)
            if self.strict:
                raise CompletenessError(keys)
            logger.warning("%d translation keys are incomplete: %s", len(keys), ", ".join(keys))

        return MessageBundle(
            dictionaries=selected,
            default_locale=self.registry.default,
            coverage=coverage,
            incomplete=incomplete,
        )

    def load(self) -> MessageBundle:
        dictionaries = {code: self._read(code) for code in self.registry.codes}
        return self.load_from_dicts(dictionaries)

    def load_from_dicts(self, dictionaries: Mapping[str, Dict[str, Any]]) -> MessageBundle:
        bundle = self._validate(dictionaries)
        applied: List[Callable[[MessageBundle], None]] = []
        try:
            for hook in self.reload_hooks:
                hook(bundle)
                applied.append(hook)
        except Exception:
            logger.exception("Reload hook rejected new messages; keeping the previous bundle")
            if self.cache is not None:
                for hook in applied:
                    hook(self.cache)
            raise
        # the cache only moves once every hook has accepted the bundle
        self.cache = bundle
        logger.info(
            "Loaded %d locales (%d key paths) from %s",
            len(bundle.dictionaries),
            len(bundle.coverage.index),
            self.messages_dir,
        )
        return bundle

    def get_cached_bundle(self) -> Optional[MessageBundle]:
        return self.cache

    def translator(self, locale: str) -> Translator:
        if self.cache is None:
            raise MissingLocaleError("messages_not_loaded")
        return self.cache.translator(locale)
