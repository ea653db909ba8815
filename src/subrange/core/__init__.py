"""Ranges, line store and the iterators that walk them."""

from .iterators import LinesIterator, RangesIterator
from .protocols import LineStore, RangeCollection, RangeLike, TextLine
from .range import Range, RangeList, parse_range_list
from .subtitle import Subtitle, SubtitleLine

__all__ = [
    "LinesIterator",
    "RangesIterator",
    "LineStore",
    "RangeCollection",
    "RangeLike",
    "TextLine",
    "Range",
    "RangeList",
    "parse_range_list",
    "Subtitle",
    "SubtitleLine",
]
