"""Configuration models and loader utilities."""

from __future__ import annotations

import dataclasses
import pathlib
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml


@dataclass(slots=True)
class IterationConfig:
    forward: bool = True
    lines_forward: bool = False


@dataclass(slots=True)
class SelectionConfig:
    ranges: str = ""
    normalize: bool = False


@dataclass(slots=True)
class DocumentConfig:
    encoding: str = "utf-8"
    strip_whitespace: bool = True


@dataclass(slots=True)
class PathsConfig:
    output_dir: pathlib.Path = pathlib.Path("./output")


@dataclass(slots=True)
class ScriptConfig:
    iteration: IterationConfig = field(default_factory=IterationConfig)
    selection: SelectionConfig = field(default_factory=SelectionConfig)
    document: DocumentConfig = field(default_factory=DocumentConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)


def _resolve_path(value: Any) -> Optional[pathlib.Path]:
    if value is None:
        return None
    return pathlib.Path(value).expanduser()


def load_config(path: pathlib.Path) -> ScriptConfig:
    """Load configuration from a YAML file."""
    with path.open("r", encoding="utf-8") as handle:
        data: Dict[str, Any] = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration root must be a mapping: {path}")
    return apply_overrides(ScriptConfig(), data)


def apply_overrides(config: ScriptConfig, overrides: Dict[str, Any]) -> ScriptConfig:
    """Apply dictionary overrides recursively to a configuration object."""

    def merge(target: Any, src: Dict[str, Any]) -> Any:
        if not dataclasses.is_dataclass(target):
            raise TypeError("Target must be a dataclass instance")
        for key, value in src.items():
            if not hasattr(target, key):
                raise KeyError(f"Unknown configuration key: {key}")
            attr = getattr(target, key)
            if dataclasses.is_dataclass(attr):
                if not isinstance(value, dict):
                    raise ValueError(f"Configuration section '{key}' must be a mapping")
                merge(attr, value)
            elif isinstance(attr, pathlib.Path) or key.endswith("_dir"):
                setattr(target, key, _resolve_path(value))
            else:
                setattr(target, key, value)
        return target

    merge(config, overrides)
    return config


def validate_config(config: ScriptConfig) -> None:
    """Validate logical invariants of the configuration."""
    if not isinstance(config.iteration.forward, bool):
        raise ValueError("iteration.forward must be a boolean")
    if not isinstance(config.iteration.lines_forward, bool):
        raise ValueError("iteration.lines_forward must be a boolean")
    if not isinstance(config.selection.ranges, str):
        raise ValueError("selection.ranges must be a string such as '0-2,5-7'")
    if not config.document.encoding:
        raise ValueError("document.encoding cannot be empty")
    if config.paths.output_dir is None:
        raise ValueError("paths.output_dir must be set")


__all__ = [
    "IterationConfig",
    "SelectionConfig",
    "DocumentConfig",
    "PathsConfig",
    "ScriptConfig",
    "load_config",
    "apply_overrides",
    "validate_config",
]
