"""Shared fixtures."""

from __future__ import annotations

import logging
from typing import Iterator

import pytest

from subrange import logging as subrange_logging


@pytest.fixture(autouse=True)
def reset_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setattr(subrange_logging, "_LOGGER", None)
    yield
    logger = logging.getLogger("subrange")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
