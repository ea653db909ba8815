"""Tests for flattening ranges into lines."""

from __future__ import annotations

from typing import Any, List

from subrange.core.iterators import LinesIterator
from subrange.core.range import Range, RangeList
from subrange.core.subtitle import Subtitle


class _IdentityStore:
    """Line store whose line at index ``i`` is ``i`` itself."""

    def line(self, index: int) -> int:
        return index


def _walk(iterator: LinesIterator) -> List[Any]:
    seen = []
    while iterator.has_next():
        seen.append(iterator.next())
    return seen


def test_empty_collection_is_exhausted_immediately() -> None:
    for forward in (True, False):
        iterator = LinesIterator(RangeList(), _IdentityStore(), forward=forward)
        assert not iterator.has_next()
        assert iterator.next() is None
        assert iterator.current() is None


def test_forward_walk_yields_both_range_edges() -> None:
    ranges = RangeList([Range(0, 2), Range(5, 7)])
    assert _walk(LinesIterator(ranges, _IdentityStore())) == [0, 1, 2, 5, 6, 7]


def test_backward_walk_mirrors_forward_walk() -> None:
    ranges = RangeList([Range(0, 2), Range(5, 7)])
    assert _walk(LinesIterator(ranges, _IdentityStore(), forward=False)) == [7, 6, 5, 2, 1, 0]


def test_empty_range_yields_its_edge_once() -> None:
    ranges = RangeList([Range(3, 3), Range(6, 7)])
    assert _walk(LinesIterator(ranges, _IdentityStore())) == [3, 6, 7]


def test_next_after_exhaustion_keeps_returning_none() -> None:
    iterator = LinesIterator(RangeList([Range(0, 1)]), _IdentityStore())
    assert _walk(iterator) == [0, 1]
    assert not iterator.has_next()
    assert iterator.next() is None
    assert iterator.next() is None
    assert not iterator.has_next()


def test_current_only_reports_lines_inside_the_half_open_range() -> None:
    iterator = LinesIterator(RangeList([Range(0, 2)]), _IdentityStore())
    assert iterator.current() is None
    iterator.next()
    assert iterator.current() == iterator.current() == 0
    iterator.next()
    assert iterator.current() == 1
    iterator.next()
    assert iterator.line_index == 2
    assert iterator.current() is None


def test_lines_are_resolved_through_the_store() -> None:
    subtitle = Subtitle.from_texts(["zero", "one", "two", "three"])
    iterator = LinesIterator(RangeList([Range(1, 3)]), subtitle, forward=False)
    assert [line.primary_text for line in iterator] == ["three", "two", "one"]


def test_lines_past_the_store_resolve_to_none() -> None:
    subtitle = Subtitle.from_texts(["zero", "one"])
    lines = list(LinesIterator(RangeList([Range(0, 2)]), subtitle))
    assert [line.primary_text if line else None for line in lines] == ["zero", "one", None]
