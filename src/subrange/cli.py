"""Command line interface for subrange."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional, Sequence

from .config import ScriptConfig, apply_overrides, load_config, validate_config
from .core.iterators import LinesIterator, RangesIterator
from .core.range import Range, RangeList, parse_range_list
from .core.subtitle import Subtitle
from .logging import configure_logging, get_logger
from .scripting import Debug, ScriptContext, get_script, list_scripts
from .utils.text import normalize_whitespace

LOGGER = get_logger("cli")


class ScriptRunner:
    """Load plain text documents and walk or edit their selected lines."""

    def __init__(self, config: ScriptConfig) -> None:
        self._config = config

    # ------------------------------------------------------------------
    def load_document(self, path: Path) -> Subtitle:
        """Read one subtitle line per text line."""
        if not path.is_file():
            raise FileNotFoundError(f"Document not found: {path}")
        doc_cfg = self._config.document
        with path.open("r", encoding=doc_cfg.encoding) as handle:
            texts = handle.read().splitlines()
        if doc_cfg.strip_whitespace:
            texts = [normalize_whitespace(text) for text in texts]
        LOGGER.debug("Loaded %s lines from %s", len(texts), path)
        return Subtitle.from_texts(texts)

    def save_document(self, subtitle: Subtitle, target: Path) -> Path:
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding=self._config.document.encoding) as handle:
            handle.write("".join(f"{text}\n" for text in subtitle.texts()))
        return target

    def selection_for(self, subtitle: Subtitle, selection_text: Optional[str]) -> RangeList:
        """Resolve the selection, defaulting to every line of ``subtitle``.

        Line iteration yields both edges of a range, so the whole document is
        ``Range(0, count - 1)``.
        """
        text = selection_text if selection_text is not None else self._config.selection.ranges
        selection = parse_range_list(text)
        if not len(selection) and subtitle.lines_count():
            selection = RangeList([Range(0, subtitle.lines_count() - 1)])
        if self._config.selection.normalize:
            selection = selection.normalized()
        return selection

    def report_ranges(self, selection: RangeList) -> List[Range]:
        seen: List[Range] = []
        ranges_it = RangesIterator(selection, forward=self._config.iteration.forward)
        while ranges_it.has_next():
            item = ranges_it.next()
            LOGGER.info("%s:%s", item.start, item.end)
            seen.append(item)
        return seen

    def report_lines(self, subtitle: Subtitle, selection: RangeList) -> List[int]:
        seen: List[int] = []
        lines_it = LinesIterator(selection, subtitle, forward=self._config.iteration.forward)
        for line in lines_it:
            if line is None:
                LOGGER.warning("Selection reaches past the document at line %s", lines_it.line_index)
                continue
            LOGGER.info("%s: %s", lines_it.line_index, line.plain_primary_text())
            seen.append(lines_it.line_index)
        return seen

    def run_script(self, name: str, source: Path, selection_text: Optional[str], output: Optional[Path]) -> int:
        info = get_script(name)
        subtitle = self.load_document(source)
        context = ScriptContext(
            subtitle=subtitle,
            selection=self.selection_for(subtitle, selection_text),
            debug=Debug(),
            lines_forward=self._config.iteration.lines_forward,
        )
        LOGGER.info("Running %s on %s", info.name, source)
        result = info.run(context)
        if info.modifies_subtitle:
            target = output or self._config.paths.output_dir / f"{source.stem}.txt"
            self.save_document(subtitle, target)
            LOGGER.info("Wrote %s lines to %s", subtitle.lines_count(), target)
        return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="subrange", description="Walk and edit selected subtitle lines")
    parser.add_argument("--version", action="version", version="subrange 0.1.0")
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_common(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("--config", type=Path, default=None)
        sub.add_argument("-v", "--verbose", action="store_true")
        sub.add_argument("-q", "--quiet", action="store_true")

    def add_selection(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("path", type=Path, help="Plain text document, one subtitle line per line")
        sub.add_argument("--select", default=None, help="Line ranges such as '0-2,5-7'")
        sub.add_argument("--forward", dest="forward", action="store_true", default=None)
        sub.add_argument("--backward", dest="forward", action="store_false")
        sub.add_argument("--normalize", action="store_true", help="Sort and join overlapping ranges")

    ranges = subparsers.add_parser("ranges", help="List the selected ranges")
    add_selection(ranges)
    add_common(ranges)

    lines = subparsers.add_parser("lines", help="List the selected lines")
    add_selection(lines)
    add_common(lines)

    run = subparsers.add_parser("run", help="Run a registered script on a document")
    run.add_argument("script", help="Script name, see 'subrange scripts'")
    add_selection(run)
    run.add_argument("--lines-forward", dest="lines_forward", action="store_true", default=None)
    run.add_argument("--output", type=Path, default=None)
    add_common(run)

    scripts = subparsers.add_parser("scripts", help="List registered scripts")
    add_common(scripts)
    return parser


def _apply_cli_overrides(config: ScriptConfig, args: argparse.Namespace) -> ScriptConfig:
    overrides = {}
    if getattr(args, "forward", None) is not None:
        overrides.setdefault("iteration", {})["forward"] = args.forward
    if getattr(args, "lines_forward", None) is not None:
        overrides.setdefault("iteration", {})["lines_forward"] = args.lines_forward
    if getattr(args, "normalize", False):
        overrides.setdefault("selection", {})["normalize"] = True
    if overrides:
        config = apply_overrides(config, overrides)
    return config


def _load_config(args: argparse.Namespace) -> ScriptConfig:
    config_path: Optional[Path] = args.config
    if config_path is None:
        config = ScriptConfig()
    elif not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")
    else:
        config = load_config(config_path)
    config = _apply_cli_overrides(config, args)
    validate_config(config)
    return config


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=getattr(args, "verbose", False), quiet=getattr(args, "quiet", False))

    try:
        config = _load_config(args)
        runner = ScriptRunner(config)
        if args.command == "scripts":
            for info in list_scripts():
                LOGGER.info("%s [%s] v%s: %s", info.name, info.category, info.version, info.summary)
            return 0
        if args.command == "run":
            runner.run_script(args.script, args.path, args.select, args.output)
            return 0
        subtitle = runner.load_document(args.path)
        selection = runner.selection_for(subtitle, args.select)
        if args.command == "ranges":
            runner.report_ranges(selection)
            return 0
        if args.command == "lines":
            runner.report_lines(subtitle, selection)
            return 0
    except (FileNotFoundError, KeyError, ValueError) as exc:
        LOGGER.error("%s", exc)
        return 2

    parser.print_help()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
