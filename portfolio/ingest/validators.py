"""Validation helpers for Message Dictionaries and catalog records."""
from __future__ import annotations

from typing import Iterable, List, Mapping

import pandas as pd

from portfolio.i18n.messages import lookup
from portfolio.ingest.coverage import coverage_frame, find_incomplete


class SchemaValidationError(ValueError):
    """Raised when a Message Dictionary holds something other than strings and objects."""


class CompletenessError(ValueError):
    """Raised when key paths are not present with the same shape in every locale."""

    def __init__(self, keys: List[str]) -> None:
        super().__init__(f"incomplete:{','.join(keys)}")
        self.keys = keys


class MissingKeyError(ValueError):
    """Raised when a catalog record references a key that does not resolve."""


class IdConsistencyError(ValueError):
    """Raised when the keys of one catalog record do not share its slug."""


def ensure_string_leaves(tree: Mapping, label: str, prefix: str = "") -> None:
    for key, value in tree.items():
        if not isinstance(key, str) or not key or "." in key:
            raise SchemaValidationError(f"invalid_key:{label}:{prefix}{key}")
        path = f"{prefix}{key}"
        if isinstance(value, Mapping):
            ensure_string_leaves(value, label, f"{path}.")
        elif not isinstance(value, str):
            raise SchemaValidationError(f"invalid_leaf:{label}:{path}")


def ensure_complete(dictionaries: Mapping[str, Mapping]) -> pd.DataFrame:
    """Return the coverage frame, raising :class:`CompletenessError` on any gap."""

    frame = coverage_frame(dictionaries)
    incomplete = find_incomplete(frame)
    if not incomplete.empty:
        raise CompletenessError(sorted(str(key) for key in incomplete.index))
    return frame


def _resolves(tree: Mapping, key: str) -> bool:
    value = lookup(tree, key)
    return isinstance(value, str) and bool(value.strip())


def ensure_catalog_keys(entries: Iterable, dictionaries: Mapping[str, Mapping]) -> None:
    """Every key a catalog record carries must resolve to a non-empty string in every locale."""

    entries = list(entries)
    for locale, tree in dictionaries.items():
        missing = sorted(
            {
                key
                for entry in entries
                for key in entry.translation_keys()
                if not _resolves(tree, key)
            }
        )
        if missing:
            raise MissingKeyError(f"missing_keys:{locale}:{','.join(missing)}")


def _slug_at(key: str, slug: str, index: int) -> bool:
    parts = key.split(".")
    return len(parts) > index and parts[index] == slug


def ensure_consistent_slugs(entries: Iterable) -> None:
    for entry in entries:
        invalid = sorted(key for key in entry.slug_keys() if not _slug_at(key, entry.slug, entry.slug_segment))
        if invalid:
            raise IdConsistencyError(f"slug_mismatch:{entry.slug}:{','.join(invalid)}")
