"""Tests for the in-memory line store."""

from __future__ import annotations

import pytest

from subrange.core.iterators import LinesIterator
from subrange.core.range import Range, RangeList
from subrange.core.subtitle import Subtitle, SubtitleLine


def test_line_text_accessors_strip_markup() -> None:
    line = SubtitleLine("<i>Hello</i> <b>there</b> &amp; you", "<font color=\"#ff0000\">Hola</font>")
    assert line.plain_primary_text() == "Hello there & you"
    assert line.rich_primary_text() == "<i>Hello</i> <b>there</b> &amp; you"
    assert line.plain_secondary_text() == "Hola"


def test_line_lookup_outside_store_is_none() -> None:
    subtitle = Subtitle.from_texts(["a", "b"])
    assert subtitle.line(1).primary_text == "b"
    assert subtitle.line(2) is None
    assert subtitle.line(-1) is None


def test_insert_and_remove_lines() -> None:
    subtitle = Subtitle.from_texts(["a", "c"])
    subtitle.insert_line(SubtitleLine("b"), 1)
    subtitle.insert_line(SubtitleLine("d"))
    assert subtitle.texts() == ["a", "b", "c", "d"]
    assert subtitle.remove_line(0).primary_text == "a"
    with pytest.raises(IndexError):
        subtitle.remove_line(3)


def test_remove_lines_covers_every_range() -> None:
    subtitle = Subtitle.from_texts([str(i) for i in range(8)])
    removed = subtitle.remove_lines(RangeList([Range(5, 7), Range(0, 2), Range(6, 12)]))
    assert removed == 6
    assert subtitle.texts() == ["3", "4"]


def test_remove_lines_matches_the_lines_a_selection_walks() -> None:
    subtitle = Subtitle.from_texts([str(i) for i in range(6)])
    selection = RangeList([Range(1, 2), Range(4, 4)])
    walked = [line.primary_text for line in LinesIterator(selection, subtitle)]
    subtitle.remove_lines(selection)
    assert walked == ["1", "2", "4"]
    assert subtitle.texts() == ["0", "3", "5"]
