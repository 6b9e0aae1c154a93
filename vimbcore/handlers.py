"""Registry of external commands that handle URIs by scheme."""

from __future__ import annotations

import re

_PLACEHOLDER = re.compile(r"%[%s]")


class HandlerRegistry:
    """Maps URI schemes to command templates where '%s' stands for the URI."""

    def __init__(self) -> None:
        self._handlers: dict[str, str] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def add(self, key: str, cmd: str) -> None:
        self._handlers[key] = cmd

    def remove(self, key: str) -> bool:
        """Remove a handler; return whether one was registered."""
        return self._handlers.pop(key, None) is not None

    def lookup(self, uri: str) -> str | None:
        """Return the command template for the URI's scheme, if any."""
        scheme, sep, _ = uri.partition(":")
        if not sep:
            return None
        return self._handlers.get(scheme)

    def command_for(self, uri: str) -> str | None:
        """Return the command line that would handle the URI, or None."""
        template = self.lookup(uri)
        if template is None:
            return None
        return _PLACEHOLDER.sub(lambda m: uri if m.group() == "%s" else "%", template)

    def complete(self, prefix: str = "") -> list[str]:
        """Return the sorted handler keys starting with prefix."""
        return sorted(key for key in self._handlers if key.startswith(prefix or ""))