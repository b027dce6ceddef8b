"""Heading path stack tracking the open ancestor chain during traversal"""

from typing import Optional

from mdblocks.core.models import HeadingPathEntry


class HeadingPathStack:
    """Ordered chain of open headings, shallowest first."""

    def __init__(self):
        self._entries: list[HeadingPathEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, depth: int, title: str, raw_title: str = '') -> HeadingPathEntry:
        """Close every open heading at depth >= `depth`, then open a new one."""
        while self._entries and self._entries[-1].depth >= depth:
            self._entries.pop()
        entry = HeadingPathEntry(title=title, depth=depth, raw_title=raw_title)
        self._entries.append(entry)
        return entry

    def current_top(self) -> Optional[HeadingPathEntry]:
        return self._entries[-1] if self._entries else None

    def current_path(self) -> list[str]:
        """Titles of all open headings except the innermost one."""
        return [e.title for e in self._entries[:-1]]

    def clear(self) -> None:
        self._entries.clear()
