"""Line index ranges and ordered range collections."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

_SELECTION_ITEM = re.compile(r"^\s*(\d+)\s*(?:-\s*(\d+)\s*)?$")


@dataclass(frozen=True, slots=True)
class Range:
    """A half-open interval ``[start, end)`` of line indices."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"Range start must be non-negative, got {self.start}")
        if self.start > self.end:
            raise ValueError(f"Range start {self.start} exceeds end {self.end}")

    @property
    def length(self) -> int:
        return self.end - self.start

    def contains(self, index: int) -> bool:
        return self.start <= index < self.end

    def shift(self, offset: int) -> "Range":
        return Range(self.start + offset, self.end + offset)

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.end))


class RangeList:
    """Ordered collection of ranges; insertion order is traversal order.

    A selection covers the lines ``LinesIterator`` visits, which include both
    edges of each range: ``Range(2, 4)`` covers lines 2, 3 and 4 and
    ``Range(3, 3)`` covers line 3. ``normalized``, ``trimmed`` and
    ``indexes`` all work in those terms.
    """

    def __init__(self, ranges: Iterable[Range] = ()) -> None:
        self._ranges: List[Range] = list(ranges)

    def ranges_count(self) -> int:
        return len(self._ranges)

    def range(self, index: int) -> Range:
        return self._ranges[index]

    def append(self, item: Range) -> None:
        self._ranges.append(item)

    def normalized(self) -> "RangeList":
        """Return a sorted copy where overlapping or adjacent ranges are joined."""
        merged: List[Range] = []
        for item in sorted(self._ranges, key=lambda r: (r.start, r.end)):
            if merged and item.start <= merged[-1].end + 1:
                last = merged[-1]
                merged[-1] = Range(last.start, max(last.end, item.end))
            else:
                merged.append(item)
        return RangeList(merged)

    def trimmed(self, max_index: int) -> "RangeList":
        """Clip every range to lines ``0..max_index``, dropping ranges that start past it."""
        return RangeList(
            Range(item.start, min(item.end, max_index))
            for item in self._ranges
            if item.start <= max_index
        )

    def indexes(self) -> List[int]:
        return [index for item in self._ranges for index in range(item.start, item.end + 1)]

    def __len__(self) -> int:
        return len(self._ranges)

    def __iter__(self) -> Iterator[Range]:
        return iter(self._ranges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RangeList):
            return NotImplemented
        return self._ranges == other._ranges

    def __repr__(self) -> str:
        return f"RangeList({self._ranges!r})"


def parse_range_list(text: Optional[str]) -> RangeList:
    """Parse a selection such as ``"3"`` or ``"0-2,5-7"``.

    A single index ``n`` selects ``Range(n, n)``; ``a-b`` maps to
    ``Range(a, b)`` as written. Blank input yields an empty list.
    """
    ranges = RangeList()
    if text is None or not text.strip():
        return ranges
    for item in text.split(","):
        match = _SELECTION_ITEM.match(item)
        if match is None:
            raise ValueError(f"Invalid range selection item: {item.strip()!r}")
        start = int(match.group(1))
        end = int(match.group(2)) if match.group(2) is not None else start
        ranges.append(Range(start, end))
    return ranges


__all__ = ["Range", "RangeList", "parse_range_list"]
