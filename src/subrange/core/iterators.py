"""Cursor based iteration over range collections and the lines they select.

Both iterators follow a check-then-advance contract (``has_next`` before
``next``) and also speak Python's iterator protocol. Either way they are
single pass: build a fresh iterator to walk the same ranges again.
"""

from __future__ import annotations

from typing import Any, Optional

from .protocols import LineStore, RangeCollection, RangeLike


class RangesIterator:
    """Walk a range collection forward or backward."""

    def __init__(self, ranges: RangeCollection, forward: bool = True) -> None:
        self.forward = forward
        self._ranges = ranges
        self._index = -1 if forward else ranges.ranges_count()

    def current(self) -> Optional[RangeLike]:
        if 0 <= self._index < self._ranges.ranges_count():
            return self._ranges.range(self._index)
        return None

    def has_next(self) -> bool:
        if self.forward:
            return self._index < self._ranges.ranges_count() - 1
        return self._index > 0

    def next(self) -> Optional[RangeLike]:
        # Past the last range the cursor parks on the sentinel instead of
        # drifting further out of bounds.
        if self.forward:
            self._index = min(self._index + 1, self._ranges.ranges_count())
        else:
            self._index = max(self._index - 1, -1)
        return self.current()

    def __iter__(self) -> "RangesIterator":
        return self

    def __next__(self) -> RangeLike:
        if not self.has_next():
            raise StopIteration
        return self.next()


class LinesIterator:
    """Flatten the ranges of a collection into the lines they cover.

    Entering a range positions the cursor on its entry edge (``start``
    forward, ``end`` backward) and yields that line directly; stepping within
    a range continues until the cursor reaches the opposite edge, which is
    yielded too. For ranges ``[(0, 2), (5, 7)]`` a forward walk therefore
    produces lines ``0, 1, 2, 5, 6, 7`` and a backward walk ``7, 6, 5, 2, 1,
    0``. ``current`` only reports lines inside ``[start, end)``.
    """

    def __init__(self, ranges: RangeCollection, subtitle: LineStore, forward: bool = True) -> None:
        self.forward = forward
        self._ranges_it = RangesIterator(ranges, forward)
        self._subtitle = subtitle
        self._line_index = -1

    @property
    def line_index(self) -> int:
        return self._line_index

    def current(self) -> Any:
        current_range = self._ranges_it.current()
        if current_range is not None and current_range.start <= self._line_index < current_range.end:
            return self._subtitle.line(self._line_index)
        return None

    def has_next(self) -> bool:
        if self._ranges_it.has_next():
            return True
        current_range = self._ranges_it.current()
        if current_range is None:
            return False
        if self.forward:
            return self._line_index < current_range.end
        return self._line_index > current_range.start

    def next(self) -> Any:
        current_range = self._ranges_it.current()
        exit_edge = None
        if current_range is not None:
            exit_edge = current_range.end if self.forward else current_range.start
        if current_range is None or self._line_index == exit_edge:
            if not self._ranges_it.has_next():
                return None
            current_range = self._ranges_it.next()
            self._line_index = current_range.start if self.forward else current_range.end
        else:
            self._line_index += 1 if self.forward else -1
        return self._subtitle.line(self._line_index)

    def __iter__(self) -> "LinesIterator":
        return self

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        return self.next()


__all__ = ["RangesIterator", "LinesIterator"]
