"""Supported locales and the default locale."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple


class LocaleConfigError(ValueError):
    """Raised when the default locale is not one of the supported locales."""


@dataclass(frozen=True)
class Locale:
    code: str
    name: str
    flag: str


class LocaleRegistry:
    """Fixed, ordered set of locales with one designated default."""

    def __init__(self, locales: Iterable[Locale], default: str) -> None:
        self._locales: Dict[str, Locale] = {}
        for locale in locales:
            self._locales[locale.code.lower()] = locale
        if default not in self._locales:
            raise LocaleConfigError(f"default_not_supported:{default}")
        self.default = default

    @property
    def codes(self) -> Tuple[str, ...]:
        return tuple(self._locales)

    def get(self, code: str) -> Locale:
        return self._locales[code]

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code in self._locales

    def __iter__(self):
        return iter(self._locales.values())

    def __len__(self) -> int:
        return len(self._locales)

    def with_default(self, default: str) -> "LocaleRegistry":
        return LocaleRegistry(self._locales.values(), default)


LOCALES = (
    Locale(code="es", name="Español", flag="🇪🇸"),
    Locale(code="en", name="English", flag="🇬🇧"),
)
DEFAULT_LOCALE = "es"

registry = LocaleRegistry(LOCALES, DEFAULT_LOCALE)
