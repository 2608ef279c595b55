"""User-visible error channel for property access failures."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .errors import DispimError

ErrorReporter = Callable[[DispimError], None]


class LoggingReporter:
    """Default error channel: writes each reported error to a logger."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or logging.getLogger(__name__)

    def __call__(self, error: DispimError) -> None:
        self._log.error("%s", error)


__all__ = ["ErrorReporter", "LoggingReporter"]
