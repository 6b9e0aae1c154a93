"""Parsing of ex command lines such as ':set foo=bar' or ':3open uri'."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterator
from dataclasses import dataclass
from itertools import takewhile

_SPACE = " \t\n\r\v\f"
_COUNT = re.compile(r"[0-9]+")


class ExFlag(enum.IntFlag):
    """How the text after an ex command name is parsed."""

    NONE = 0x000
    BANG = 0x001  # a '!' may follow the command name
    LHS = 0x002  # a single word follows the command name
    RHS = 0x004  # a right hand side follows, ended by '|' or newline
    EXP = 0x008  # placeholders in the right hand side are expanded
    CMD = 0x010  # like RHS, but '|' belongs to the right hand side


class ExCode(enum.Enum):
    """Known ex commands, in the order used to resolve abbreviations."""

    AUTOCMD = ("autocmd", ExFlag.CMD | ExFlag.BANG)
    AUGROUP = ("augroup", ExFlag.LHS | ExFlag.BANG)
    BMA = ("bma", ExFlag.RHS)
    BMR = ("bmr", ExFlag.RHS)
    CMAP = ("cmap", ExFlag.LHS | ExFlag.CMD)
    CNOREMAP = ("cnoremap", ExFlag.LHS | ExFlag.CMD)
    CUNMAP = ("cunmap", ExFlag.LHS)
    HARDCOPY = ("hardcopy", ExFlag.NONE)
    HANDADD = ("handler-add", ExFlag.RHS)
    HANDREM = ("handler-remove", ExFlag.RHS)
    EVAL = ("eval", ExFlag.CMD | ExFlag.BANG)
    IMAP = ("imap", ExFlag.LHS | ExFlag.CMD)
    INOREMAP = ("inoremap", ExFlag.LHS | ExFlag.CMD)
    IUNMAP = ("iunmap", ExFlag.LHS)
    NMAP = ("nmap", ExFlag.LHS | ExFlag.CMD)
    NNOREMAP = ("nnoremap", ExFlag.LHS | ExFlag.CMD)
    NORMAL = ("normal", ExFlag.BANG | ExFlag.CMD)
    NUNMAP = ("nunmap", ExFlag.LHS)
    OPEN = ("open", ExFlag.CMD)
    QUIT = ("quit", ExFlag.BANG)
    QUNSHIFT = ("qunshift", ExFlag.RHS)
    QCLEAR = ("qclear", ExFlag.RHS)
    QPOP = ("qpop", ExFlag.NONE)
    QPUSH = ("qpush", ExFlag.RHS)
    REG = ("register", ExFlag.NONE)
    SAVE = ("save", ExFlag.RHS | ExFlag.EXP)
    SET = ("set", ExFlag.RHS)
    SHELLCMD = ("shellcmd", ExFlag.CMD | ExFlag.EXP | ExFlag.BANG)
    SCA = ("shortcut-add", ExFlag.RHS)
    SCD = ("shortcut-default", ExFlag.RHS)
    SCR = ("shortcut-remove", ExFlag.RHS)
    TABOPEN = ("tabopen", ExFlag.CMD)

    def __init__(self, command: str, flags: ExFlag) -> None:
        self.command = command
        self.flags = flags


_COMMANDS = list(ExCode)


class ExParseError(ValueError):
    """Raised when an ex command line names no known command."""

    def __init__(self, message: str, word: str = "", nohist: bool = False) -> None:
        super().__init__(message)
        self.word = word
        self.nohist = nohist


@dataclass
class ExArg:
    """One parsed ex command with its count, bang and arguments."""

    code: ExCode
    count: int = 0
    bang: bool = False
    lhs: str = ""
    rhs: str = ""
    nohist: bool = False

    @property
    def name(self) -> str:
        return self.code.command

    @property
    def flags(self) -> ExFlag:
        return self.code.flags


def parse_command_name(text: str) -> tuple[ExCode, str]:
    """Resolve the (possibly abbreviated) command name at the start of text.

    Return the command and the text after the name. Ambiguous abbreviations
    resolve to the command listed first.
    """
    pos = 0
    first = 0
    matches = 0
    while True:
        ch = text[pos] if pos < len(text) else ""
        typed = text[:pos]
        matches = 0
        for index, code in enumerate(_COMMANDS[first:], start=first):
            label = code.command
            # Commands are grouped by their leading letters.
            if pos > 0 and not label.startswith(typed):
                break
            if ch and pos < len(label) and label[pos] == ch:
                if not matches:
                    first = index
                matches += 1
        pos += 1
        if not (
            matches
            and pos < len(text)
            and text[pos] not in _SPACE
            and text[pos] != "!"
        ):
            break

    if not matches:
        tail = "".join(takewhile(lambda c: c not in _SPACE, text[pos:]))
        word = text[:pos] + tail
        raise ExParseError(f"Unknown command: {word}", word)

    return _COMMANDS[first], text[pos:]


def _parse_count(text: str) -> tuple[int, str]:
    match = _COUNT.match(text)
    if match is None:
        return 0, text
    return int(match.group()), text[match.end():]


def _parse_lhs(text: str) -> tuple[str, str]:
    """Read a single word; a backslash escapes a space or a backslash."""
    out: list[str] = []
    pos = 0
    while pos < len(text) and text[pos] not in _SPACE:
        ch = text[pos]
        if ch == "\\":
            pos += 1
            if pos >= len(text):
                out.append("\\")
                break
            nxt = text[pos]
            if nxt in (" ", "\\"):
                out.append(nxt)
            else:
                out.append("\\" + nxt)
        else:
            out.append(ch)
        pos += 1
    return "".join(out), text[pos:]


def _parse_rhs(text: str, flags: ExFlag) -> tuple[str, str]:
    """Read the right hand side up to a newline, or '|' unless CMD is set."""
    if not flags & (ExFlag.RHS | ExFlag.CMD) or not text:
        return "", text
    cmdlist = bool(flags & ExFlag.CMD)
    pos = 0
    while pos < len(text) and text[pos] != "\n" and (cmdlist or text[pos] != "|"):
        pos += 1
    return text[:pos], text[pos:]


def parse_ex(text: str) -> Iterator[ExArg]:
    """Yield the ex commands of a command line one after another.

    nohist becomes true once a command starts with extra ':' or whitespace.
    An unknown command raises ExParseError when it is reached.
    """
    rest = text
    nohist = False
    while rest:
        stripped = rest.lstrip(":" + _SPACE)
        if stripped != rest:
            nohist = True
        rest = stripped

        count, rest = _parse_count(rest)
        rest = rest.lstrip(_SPACE)
        try:
            code, rest = parse_command_name(rest)
        except ExParseError as exc:
            exc.nohist = nohist
            raise

        bang = False
        if code.flags & ExFlag.BANG and rest.startswith("!"):
            bang, rest = True, rest[1:]

        rest = rest.lstrip(_SPACE)
        lhs = ""
        if code.flags & ExFlag.LHS:
            lhs, rest = _parse_lhs(rest)

        rest = rest.lstrip(_SPACE)
        rhs, rest = _parse_rhs(rest, code.flags)

        # Skip the separator that ended this command.
        rest = rest[1:]

        yield ExArg(code, count, bang, lhs, rhs, nohist)


def complete_command_names(prefix: str = "") -> list[str]:
    """Return the command names starting with prefix, in table order."""
    return [code.command for code in _COMMANDS if code.command.startswith(prefix or "")]