"""Script registry and the helpers scripts are given."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List

from ..core.range import RangeList
from ..core.subtitle import Subtitle
from .debug import Debug
from .examples import iterate_selection, remove_impair_lines


@dataclass(slots=True)
class ScriptContext:
    subtitle: Subtitle
    selection: RangeList
    debug: Debug
    lines_forward: bool = False


@dataclass(frozen=True, slots=True)
class ScriptInfo:
    name: str
    category: str
    version: str
    summary: str
    author: str
    run: Callable[[ScriptContext], int]
    modifies_subtitle: bool = False


def _run_iterate_selection(context: ScriptContext) -> int:
    _, lines = iterate_selection(
        context.subtitle,
        context.selection,
        context.debug,
        forward_lines=context.lines_forward,
    )
    return lines


def _run_remove_impair_lines(context: ScriptContext) -> int:
    return remove_impair_lines(context.subtitle)


SCRIPTS: Dict[str, ScriptInfo] = {
    info.name: info
    for info in (
        ScriptInfo(
            name="iterate-selection",
            category="Examples",
            version="1.0",
            summary="Iterate over selected lines and show their text.",
            author="subrange",
            run=_run_iterate_selection,
        ),
        ScriptInfo(
            name="remove-impair-lines",
            category="Examples",
            version="1.0",
            summary="Remove every other line, starting with the first.",
            author="subrange",
            run=_run_remove_impair_lines,
            modifies_subtitle=True,
        ),
    )
}


def get_script(name: str) -> ScriptInfo:
    try:
        return SCRIPTS[name]
    except KeyError:
        raise KeyError(f"Unknown script: {name}") from None


def list_scripts() -> List[ScriptInfo]:
    return sorted(SCRIPTS.values(), key=lambda info: (info.category, info.name))


__all__ = [
    "Debug",
    "ScriptContext",
    "ScriptInfo",
    "SCRIPTS",
    "get_script",
    "list_scripts",
    "iterate_selection",
    "remove_impair_lines",
]
