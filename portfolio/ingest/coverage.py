"""Key-path coverage across locales, built as a key x locale frame."""
from __future__ import annotations

from typing import Dict, Mapping

import pandas as pd

LEAF = "leaf"
BRANCH = "branch"


def flatten_messages(tree: Mapping, prefix: str = "") -> Dict[str, str]:
    """Map every reachable key path to ``"leaf"`` or ``"branch"``."""

    flat: Dict[str, str] = {}
    for key, value in tree.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat[path] = BRANCH
            flat.update(flatten_messages(value, path))
        else:
            flat[path] = LEAF
    return flat


def coverage_frame(dictionaries: Mapping[str, Mapping]) -> pd.DataFrame:
    """One row per key path, one column per locale holding the node kind (NaN when absent)."""

    columns = {
        locale: pd.Series(flatten_messages(tree), dtype="object")
        for locale, tree in dictionaries.items()
    }
    frame = pd.DataFrame(columns)
    frame.index.name = "key"
    return frame.sort_index()


def find_incomplete(frame: pd.DataFrame) -> pd.DataFrame:
    """Rows where a locale lacks the path or the locales disagree on its shape."""

    if frame.empty:
        return frame
    missing = frame.isna().any(axis=1)
    mismatched = frame.nunique(axis=1, dropna=True) > 1
    return frame[missing | mismatched]
