"""Minimal in-memory line store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..utils.text import strip_markup
from .range import RangeList


@dataclass(slots=True)
class SubtitleLine:
    """A subtitle line holding rich (lightly marked up) primary and secondary text."""

    primary_text: str = ""
    secondary_text: str = ""

    def plain_primary_text(self) -> str:
        return strip_markup(self.primary_text)

    def rich_primary_text(self) -> str:
        return self.primary_text

    def plain_secondary_text(self) -> str:
        return strip_markup(self.secondary_text)

    def rich_secondary_text(self) -> str:
        return self.secondary_text


class Subtitle:
    """Ordered subtitle lines addressed by index."""

    def __init__(self, lines: Iterable[SubtitleLine] = ()) -> None:
        self._lines: List[SubtitleLine] = list(lines)

    @classmethod
    def from_texts(cls, texts: Iterable[str]) -> "Subtitle":
        return cls(SubtitleLine(text) for text in texts)

    def lines_count(self) -> int:
        return len(self._lines)

    def line(self, index: int) -> Optional[SubtitleLine]:
        """Return the line at ``index`` or ``None`` when there is no such line."""
        if 0 <= index < len(self._lines):
            return self._lines[index]
        return None

    def insert_line(self, line: SubtitleLine, index: int = -1) -> None:
        """Insert ``line`` before ``index``; ``-1`` appends."""
        if index < 0 or index > len(self._lines):
            self._lines.append(line)
        else:
            self._lines.insert(index, line)

    def remove_line(self, index: int) -> SubtitleLine:
        if not 0 <= index < len(self._lines):
            raise IndexError(f"Line index {index} out of range (0..{len(self._lines) - 1})")
        return self._lines.pop(index)

    def remove_lines(self, ranges: RangeList) -> int:
        """Remove every line covered by ``ranges``; returns how many were removed."""
        targets = sorted(
            {index for index in ranges.indexes() if index < len(self._lines)},
            reverse=True,
        )
        for index in targets:
            del self._lines[index]
        return len(targets)

    def texts(self) -> List[str]:
        return [line.primary_text for line in self._lines]

    def __len__(self) -> int:
        return len(self._lines)


__all__ = ["SubtitleLine", "Subtitle"]
