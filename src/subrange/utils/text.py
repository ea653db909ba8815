"""Utility helpers for text processing."""

from __future__ import annotations

import html
import re

_MARKUP_TAG = re.compile(r"</?(?:b|i|u|s|font)(?:\s[^>]*)?>", re.IGNORECASE)


def normalize_whitespace(text: str) -> str:
    """Collapse repeated whitespace characters."""
    return re.sub(r"\s+", " ", text).strip()


def strip_markup(text: str) -> str:
    """Remove the style tags used by rich line text and unescape entities."""
    return html.unescape(_MARKUP_TAG.sub("", text))


__all__ = ["normalize_whitespace", "strip_markup"]
