"""Map a client's language preferences onto a supported locale."""
from __future__ import annotations

from typing import Iterable, List, Union

from portfolio.i18n.locales import LocaleConfigError


def parse_accept_language(header: str | None) -> List[str]:
    """Split an ``Accept-Language`` header into lower-cased tags.

    Order is kept as sent; ``;q=`` weights are dropped, not used for sorting.
    """

    if not header:
        return []
    tags: List[str] = []
    for part in header.split(","):
        tag = part.split(";", 1)[0].strip().lower()
        if tag:
            tags.append(tag)
    return tags


def base_language(tag: str) -> str:
    """``"en-US;q=0.8"`` -> ``"en"``."""

    return tag.split(";", 1)[0].split("-", 1)[0].strip().lower()


def resolve_locale(
    preferences: Union[str, Iterable[str], None],
    supported: Iterable[str],
    default: str,
) -> str:
    """Return the first supported base language in ``preferences``, else ``default``.

    ``preferences`` may be an ordered list of tags or a raw header string.
    """

    supported_codes = [code.lower() for code in supported]
    if default not in supported_codes:
        raise LocaleConfigError(f"default_not_supported:{default}")

    if preferences is None:
        return default
    if isinstance(preferences, str):
        preferences = parse_accept_language(preferences)

    for tag in preferences:
        if not isinstance(tag, str):
            continue
        code = base_language(tag)
        if code and code in supported_codes:
            return code
    return default
