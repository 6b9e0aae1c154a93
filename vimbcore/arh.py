"""Automatic response headers: rules that set or drop headers by URI pattern."""

from __future__ import annotations

import re
from collections.abc import Iterable, MutableMapping
from dataclasses import dataclass, field
from functools import lru_cache

_SPACE = " \t\n\r\v\f"


class ArhSyntaxError(ValueError):
    """Raised when an auto-response-header definition cannot be parsed."""


@dataclass
class HeaderRule:
    """Headers to set (or, with a value of None, remove) for matching URIs."""

    pattern: str
    headers: dict[str, str | None] = field(default_factory=dict)

    def matches(self, uri: str) -> bool:
        return _wildmatch(self.pattern, uri)


@lru_cache(maxsize=256)
def _compile_pattern(pattern: str) -> re.Pattern[str]:
    parts = []
    for ch in pattern:
        if ch == "*":
            parts.append(".*")
        elif ch == "?":
            parts.append(".")
        else:
            parts.append(re.escape(ch))
    return re.compile("".join(parts), re.DOTALL)


def _wildmatch(pattern: str, subject: str) -> bool:
    """Match subject against a pattern where '*' and '?' are wildcards."""
    return _compile_pattern(pattern).fullmatch(subject) is not None


def _split_list(text: str) -> list[str]:
    """Split a comma separated header list, keeping quoted strings intact."""
    items: list[str] = []
    buf: list[str] = []
    quoted = False
    escaped = False
    for ch in text:
        if escaped:
            buf.append(ch)
            escaped = False
        elif quoted:
            buf.append(ch)
            if ch == "\\":
                escaped = True
            elif ch == '"':
                quoted = False
        elif ch == '"':
            quoted = True
            buf.append(ch)
        elif ch == ",":
            items.append("".join(buf))
            buf = []
        else:
            buf.append(ch)
    items.append("".join(buf))
    return [item.strip() for item in items if item.strip()]


def _unquote(value: str) -> str:
    if not value.startswith('"'):
        return value
    out: list[str] = []
    chars = iter(value[1:])
    for ch in chars:
        if ch == '"':
            break
        if ch == "\\":
            ch = next(chars, "")
        out.append(ch)
    return "".join(out)


def _parse_params(text: str) -> dict[str, str | None]:
    params: dict[str, str | None] = {}
    for item in _split_list(text):
        name, sep, value = item.partition("=")
        name = name.strip()
        if not name:
            continue
        for existing in [key for key in params if key.lower() == name.lower()]:
            del params[existing]
        params[name] = _unquote(value.strip()) if sep else None
    return params


def _read_pattern(line: str) -> tuple[str | None, str]:
    """Split off the leading pattern; None if no whitespace follows it."""
    for index, ch in enumerate(line):
        if ch in _SPACE:
            return line[:index], line[index + 1:].lstrip(_SPACE)
    return None, line


def parse_rules(data: str) -> list[HeaderRule]:
    """Parse '"pattern name=value[,...]",...' into a list of rules."""
    rules: list[HeaderRule] = []
    for item in _split_list(data):
        if item.startswith('"') and item.endswith('"'):
            item = item[1:-1]
        pattern, rest = _read_pattern(item)
        headers = _parse_params(rest) if pattern else {}
        if not pattern or not headers:
            raise ArhSyntaxError("syntax error")
        rules.append(HeaderRule(pattern, headers))
    return rules


def apply_rules(
    rules: Iterable[HeaderRule],
    uri: str,
    headers: MutableMapping[str, str],
) -> MutableMapping[str, str]:
    """Apply every matching rule to the response headers; the last match wins."""
    for rule in rules:
        if not rule.matches(uri):
            continue
        for name, value in rule.headers.items():
            for existing in [key for key in headers if key.lower() == name.lower()]:
                del headers[existing]
            if value is not None:
                headers[name] = value
    return headers