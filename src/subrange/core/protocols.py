"""Read-only contracts the iterators expect from their collaborators."""

from __future__ import annotations

from typing import Any, Protocol


class RangeLike(Protocol):
    start: int
    end: int


class RangeCollection(Protocol):
    def ranges_count(self) -> int: ...

    def range(self, index: int) -> RangeLike: ...


class LineStore(Protocol):
    def line(self, index: int) -> Any: ...


class TextLine(Protocol):
    def plain_primary_text(self) -> str: ...

    def rich_primary_text(self) -> str: ...


__all__ = ["RangeLike", "RangeCollection", "LineStore", "TextLine"]
