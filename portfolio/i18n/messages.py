"""Message lookup, ICU plural selection and placeholder interpolation."""
from __future__ import annotations

import logging
import re
from typing import Any, Dict, Mapping, Optional, Union

logger = logging.getLogger(__name__)

MessageTree = Mapping[str, Union[str, "MessageTree"]]
Values = Mapping[str, Any]

_PLACEHOLDER = re.compile(r"\{(\w+)\}")
_PLURAL_HEAD = re.compile(r"^\s*(\w+)\s*,\s*plural\s*,", re.DOTALL)
_PLURAL_OPTION = re.compile(r"\s*(=\d+|zero|one|two|few|many|other)\s*\{")


def lookup(messages: MessageTree, key: str) -> Optional[Any]:
    """Walk ``messages`` along the dotted ``key``; ``None`` when any segment is missing."""

    node: Any = messages
    for segment in key.split("."):
        if not isinstance(node, Mapping) or segment not in node:
            return None
        node = node[segment]
    return node


def _matching_brace(text: str, start: int) -> int:
    depth = 0
    for idx in range(start, len(text)):
        char = text[idx]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return idx
    return -1


def _parse_plural_options(body: str) -> Optional[Dict[str, str]]:
    options: Dict[str, str] = {}
    pos = 0
    while body[pos:].strip():
        match = _PLURAL_OPTION.match(body, pos)
        if not match:
            return None
        open_at = match.end() - 1
        close_at = _matching_brace(body, open_at)
        if close_at < 0:
            return None
        options[match.group(1)] = body[open_at + 1 : close_at]
        pos = close_at + 1
    # ICU requires an ``other`` branch
    return options if "other" in options else None


def select_plural(options: Mapping[str, str], count: Any) -> str:
    exact = options.get(f"={count}")
    if exact is not None:
        return exact
    if count == 1 and "one" in options:
        return options["one"]
    return options["other"]


def _mark_count(branch: str, name: str) -> str:
    """Turn ``#`` into ``{name}``, leaving the ``#`` of nested blocks to their own count."""

    parts = []
    depth = 0
    for char in branch:
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        parts.append("{%s}" % name if char == "#" and depth == 0 else char)
    return "".join(parts)


def _format_block(raw: str, values: Values) -> str:
    simple = _PLACEHOLDER.fullmatch(raw)
    if simple:
        name = simple.group(1)
        return str(values[name]) if name in values else raw
    inner = raw[1:-1]
    head = _PLURAL_HEAD.match(inner)
    if not head or head.group(1) not in values:
        return raw
    name = head.group(1)
    options = _parse_plural_options(inner[head.end():])
    if options is None:
        return raw
    branch = select_plural(options, values[name])
    return format_message(_mark_count(branch, name), values)


def format_message(template: str, values: Optional[Values] = None) -> str:
    """Fill ``{name}`` placeholders and ``{var, plural, ...}`` blocks in one pass.

    Blocks whose variable was not supplied are kept as written, contents
    included. Inserted values are never scanned again.
    """

    if not values:
        return template
    parts = []
    pos = 0
    while True:
        start = template.find("{", pos)
        if start < 0:
            parts.append(template[pos:])
            break
        end = _matching_brace(template, start)
        if end < 0:
            # unbalanced brace is literal text
            parts.append(template[pos : start + 1])
            pos = start + 1
            continue
        parts.append(template[pos:start])
        parts.append(_format_block(template[start : end + 1], values))
        pos = end + 1
    return "".join(parts)


def translate(messages: MessageTree, key: str, values: Optional[Values] = None) -> str:
    """Resolve ``key`` against one Message Dictionary.

    A key that is missing, or that addresses a branch instead of a string,
    resolves to the key itself so the gap is visible where it is rendered.
    """

    template = lookup(messages, key)
    if not isinstance(template, str):
        return key
    return format_message(template, values)


class Translator:
    """A Message Dictionary bound to one locale, optionally scoped to a namespace."""

    def __init__(self, locale: str, messages: MessageTree, namespace: Optional[str] = None) -> None:
        self.locale = locale
        self.messages = messages
        self.namespace = namespace

    def _full_key(self, key: str) -> str:
        return f"{self.namespace}.{key}" if self.namespace else key

    def t(self, key: str, values: Optional[Values] = None, /, **kwargs: Any) -> str:
        merged = dict(values or {})
        merged.update(kwargs)
        full_key = self._full_key(key)
        result = translate(self.messages, full_key, merged)
        if result == full_key and not self.has(key):
            logger.debug("Missing translation %s:%s", self.locale, full_key)
        return result

    __call__ = t

    def has(self, key: str) -> bool:
        return isinstance(lookup(self.messages, self._full_key(key)), str)

    def scoped(self, namespace: str) -> "Translator":
        return Translator(self.locale, self.messages, self._full_key(namespace))

    def section(self, key: Optional[str] = None) -> Optional[MessageTree]:
        """Return the sub-tree under ``key`` (or the namespace), ``None`` if it is not a branch."""

        path = self._full_key(key) if key else self.namespace
        node = lookup(self.messages, path) if path else self.messages
        return node if isinstance(node, Mapping) else None
