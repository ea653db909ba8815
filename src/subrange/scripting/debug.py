"""Message sink handed to scripts for reporting progress."""

from __future__ import annotations

import logging
from typing import Optional

from ..logging import get_logger


class Debug:
    """Route script messages to the package logger."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or get_logger("script")

    def information(self, message: str) -> None:
        self._logger.info(message)

    def warning(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str) -> None:
        self._logger.error(message)


__all__ = ["Debug"]
