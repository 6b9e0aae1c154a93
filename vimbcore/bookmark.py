"""Bookmark file with tag search, and a simple URI read-it-later queue."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


def _read_lines(path: Path) -> list[str] | None:
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except FileNotFoundError:
        return None


def _write_lines(path: Path, lines: list[str]) -> None:
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")


def _next_after(text: str, pos: int, separators: str) -> int | None:
    """Return the position just after the next separator at or after pos."""
    hits = [i for i in (text.find(sep, pos) for sep in separators) if i >= 0]
    return min(hits) + 1 if hits else None


@dataclass(frozen=True)
class Bookmark:
    """A bookmarked URI with optional title and space separated tags."""

    uri: str
    title: str | None = None
    tags: str | None = None

    @classmethod
    def from_line(cls, line: str) -> Bookmark:
        uri, sep, data = line.partition("\t")
        if not sep:
            return cls(uri)
        title, sep, tags = data.partition("\t")
        return cls(uri, title, tags if sep else None)

    def matches(self, query: str) -> bool:
        """Check that every space separated query word prefixes a tag in order.

        Without tags, the words are matched against the parts of the URI
        separated by '.' and '/'.
        """
        if not query:
            return True
        if self.tags is not None:
            text, separators = self.tags, " "
        else:
            text, separators = self.uri, "./"

        pos: int | None = 0
        for part in query.split(" "):
            found = False
            while pos is not None and pos < len(text):
                if text.startswith(part, pos):
                    found = True
                    break
                pos = _next_after(text, pos, separators)
            if not found:
                return False
        return True


class BookmarkFile:
    """Bookmarks stored one per line as uri[<tab>title[<tab>tags]]."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def add(self, uri: str, title: str | None = None, tags: str | None = None) -> None:
        if tags is not None:
            line = f"{uri}\t{title or ''}\t{tags}"
        elif title is not None:
            line = f"{uri}\t{title}"
        else:
            line = uri
        with self.path.open("a", encoding="utf-8") as fh:
            fh.write(line + "\n")

    def remove(self, uri: str) -> bool:
        """Remove every entry for uri; return whether any was removed."""
        lines = _read_lines(self.path)
        if lines is None:
            return False
        kept: list[str] = []
        removed = False
        for raw in lines:
            line = raw.strip()
            if line.partition("\t")[0] == uri:
                removed = True
                continue
            kept.append(line)
        _write_lines(self.path, kept)
        return removed

    def load(self) -> list[Bookmark]:
        """Return the bookmarks in file order, one per distinct URI."""
        seen: set[str] = set()
        bookmarks: list[Bookmark] = []
        for raw in _read_lines(self.path) or []:
            line = raw.strip()
            if not line:
                continue
            bookmark = Bookmark.from_line(line)
            if bookmark.uri in seen:
                continue
            seen.add(bookmark.uri)
            bookmarks.append(bookmark)
        return bookmarks

    def complete(self, query: str = "") -> list[Bookmark]:
        """Return the bookmarks matching all words of the query."""
        return [bm for bm in self.load() if bm.matches(query)]

    def complete_tags(self, prefix: str = "") -> list[str]:
        """Return the sorted distinct tags starting with prefix."""
        tags = {
            tag
            for bm in self.load()
            if bm.tags is not None
            for tag in bm.tags.split(" ")
            if tag
        }
        return sorted(tag for tag in tags if tag.startswith(prefix or ""))


class UriQueue:
    """A file backed queue of URIs, one per line."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def push(self, uri: str) -> None:
        """Append a URI to the end of the queue."""
        with self.path.open("a", encoding="utf-8") as fh:
            fh.write(uri + "\n")

    def unshift(self, uri: str) -> None:
        """Put a URI at the front of the queue."""
        lines = _read_lines(self.path) or []
        _write_lines(self.path, [uri, *lines])

    def pop(self) -> tuple[str | None, int]:
        """Take the oldest URI; return it with the number of items left."""
        lines = _read_lines(self.path)
        if not lines:
            return None, 0
        first, rest = lines[0], lines[1:]
        _write_lines(self.path, rest)
        return first, len(rest)

    def clear(self) -> None:
        """Remove every entry from the queue."""
        self.path.write_text("", encoding="utf-8")