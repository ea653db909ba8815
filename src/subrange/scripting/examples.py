"""Example scripts operating on a subtitle and a line selection."""

from __future__ import annotations

from typing import Tuple

from ..core.iterators import LinesIterator, RangesIterator
from ..core.protocols import RangeCollection, TextLine
from ..core.subtitle import Subtitle
from ..logging import get_logger
from .debug import Debug

LOGGER = get_logger("scripting.examples")


def describe_line(line: TextLine) -> str:
    return "Plain text: " + line.plain_primary_text() + "\n\nRich Text: " + line.rich_primary_text()


def iterate_selection(
    subtitle: Subtitle,
    selection: RangeCollection,
    debug: Debug,
    forward_lines: bool = False,
) -> Tuple[int, int]:
    """Report each selected range, then the text of each selected line.

    Ranges are always reported front to back; lines follow ``forward_lines``.
    Indices the selection covers but the subtitle lacks are skipped. Returns
    the number of ranges and lines reported.
    """
    range_count = 0
    ranges_it = RangesIterator(selection, forward=True)
    while ranges_it.has_next():
        item = ranges_it.next()
        debug.information(f"{item.start}:{item.end}")
        range_count += 1

    line_count = 0
    lines_it = LinesIterator(selection, subtitle, forward=forward_lines)
    while lines_it.has_next():
        line = lines_it.next()
        if line is None:
            LOGGER.debug("No line at index %s; skipping", lines_it.line_index)
            continue
        debug.information(describe_line(line))
        line_count += 1
    return range_count, line_count


def remove_impair_lines(subtitle: Subtitle) -> int:
    """Remove every other line, starting with the first (index 0).

    Walks from the last line to the first so removals never shift the
    indices still to be visited. Returns the number of lines removed.
    """
    removed = 0
    for line_index in range(subtitle.lines_count() - 1, -1, -1):
        if line_index % 2 == 0:
            subtitle.remove_line(line_index)
            removed += 1
    LOGGER.debug("Removed %s of %s lines", removed, removed + subtitle.lines_count())
    return removed


__all__ = ["describe_line", "iterate_selection", "remove_impair_lines"]
