"""Auto commands: ex commands run on browser events for matching URIs."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field

from .arh import _wildmatch

_SPACE = " \t\n\r\v\f"


class AuEvent(enum.Enum):
    """Events an auto command can be bound to, with their event bits."""

    ALL = ("*", 0x00FF)
    LOAD_PROVISIONAL = ("LoadProvisional", 0x0001)
    LOAD_COMMITED = ("LoadCommited", 0x0002)
    LOAD_FIRST_LAYOUT = ("LoadFirstLayout", 0x0004)
    LOAD_FINISHED = ("LoadFinished", 0x0008)
    LOAD_FAILED = ("LoadFailed", 0x0010)
    DOWNLOAD_START = ("DownloadStart", 0x0020)
    DOWNLOAD_FINISHED = ("DownloadFinished", 0x0040)
    DOWNLOAD_FAILED = ("DownloadFailed", 0x0080)

    def __init__(self, label: str, bits: int) -> None:
        self.label = label
        self.bits = bits


_EVENTS_BY_LABEL = {event.label: event for event in AuEvent}


def event_bits(name: str) -> int:
    """Return the combined bits of a comma separated list of event names."""
    parts = name.split(",")
    if len(parts) > 1 and parts[-1] == "":
        parts.pop()
    bits = 0
    for part in parts:
        event = _EVENTS_BY_LABEL.get(part)
        if event is None:
            raise ValueError(f"Bad autocmd event name: {part}")
        bits |= event.bits
    return bits


def _next_word(text: str) -> tuple[str | None, str]:
    """Split off the next word and skip the whitespace that follows it."""
    if not text:
        return None, text
    for index, ch in enumerate(text):
        if ch in _SPACE:
            return text[:index], text[index + 1:].lstrip(_SPACE)
    return text, ""


@dataclass
class _AutoCmd:
    bits: int
    excmd: str
    pattern: str


@dataclass
class _AuGroup:
    name: str
    cmds: list[_AutoCmd] = field(default_factory=list)


class AutocmdManager:
    """Holds auto command groups and runs the commands bound to events."""

    DEFAULT_GROUP = "end"

    def __init__(self, runner: Callable[[str], object] | None = None) -> None:
        self._runner = runner
        self._default = _AuGroup(self.DEFAULT_GROUP)
        self._groups: list[_AuGroup] = [self._default]
        self._current = self._default

    @property
    def current_group(self) -> str:
        return self._current.name

    @property
    def used_bits(self) -> int:
        bits = 0
        for group in self._groups:
            for cmd in group.cmds:
                bits |= cmd.bits
        return bits

    def _find_group(self, name: str) -> _AuGroup | None:
        return next((g for g in self._groups if g.name == name), None)

    def augroup(self, name: str, delete: bool = False) -> None:
        """Select, create or (with delete) remove an auto command group."""
        if not name:
            raise ValueError("missing group name")
        if name == self.DEFAULT_GROUP:
            self._current = self._default
            return
        group = self._find_group(name)
        if delete:
            if group is None:
                return
            if self._current is group:
                self._current = self._default
            self._groups.remove(group)
            return
        if group is None:
            group = _AuGroup(name)
            self._groups.insert(0, group)
        self._current = group

    def add(self, line: str, delete: bool = False) -> None:
        """Handle ':au[tocmd][!] [group] {event} {pat} {cmd}'."""
        word, rest = _next_word(line)
        group: _AuGroup | None = None
        if word is not None:
            group = self._find_group(word)
            if group is not None:
                word, rest = _next_word(rest)
        if group is None:
            group = self._current

        if word is not None:
            bits = event_bits(word)
            word, rest = _next_word(rest)
        else:
            bits = AuEvent.ALL.bits

        pattern = word if word is not None else "*"
        excmd = rest or None

        if delete:
            group.cmds = [
                cmd
                for cmd in group.cmds
                if not (cmd.bits & bits and _wildmatch(pattern, cmd.pattern))
            ]
            return

        if excmd is not None:
            group.cmds.append(_AutoCmd(bits, excmd, pattern))

    def run(
        self,
        event: AuEvent,
        uri: str | None = None,
        group: str | None = None,
    ) -> list[str]:
        """Run the commands bound to the event; return the commands run."""
        bits = event.bits
        if not self.used_bits & bits:
            return []
        executed: list[str] = []
        for grp in self._groups:
            if group is not None and group != grp.name:
                continue
            for cmd in list(grp.cmds):
                if not bits & cmd.bits:
                    continue
                if uri is not None and not _wildmatch(cmd.pattern, uri):
                    continue
                if self._runner is not None:
                    self._runner(cmd.excmd)
                executed.append(cmd.excmd)
        return executed

    def complete_groups(self, prefix: str = "") -> list[str]:
        """Return the group names starting with prefix."""
        return [g.name for g in self._groups if g.name.startswith(prefix or "")]

    def complete_events(self, prefix: str = "") -> list[str]:
        """Return the event names starting with prefix."""
        return [e.label for e in AuEvent if e.label.startswith(prefix or "")]