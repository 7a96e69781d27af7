# vcr_cassette/infrastructure/logging/loguru_logger.py
from __future__ import annotations

from typing import Any, Dict, Optional

from loguru import logger as _loguru

from vcr_cassette.application.ports.logger import LoggerPort


class LoguruLogger(LoggerPort):
    """LoggerPort backed by loguru; fields travel in `record["extra"]`."""

    def __init__(self, bound: Optional[Dict[str, Any]] = None) -> None:
        self._bound = dict(bound or {})

    def bind(self, **fields: Any) -> "LoguruLogger":
        merged = dict(self._bound)
        merged.update(fields)
        return LoguruLogger(merged)

    def debug(self, event: str, **fields: Any) -> None:
        self._emit("DEBUG", event, fields)

    def info(self, event: str, **fields: Any) -> None:
        self._emit("INFO", event, fields)

    def error(self, event: str, **fields: Any) -> None:
        self._emit("ERROR", event, fields)

    def _emit(self, level: str, event: str, fields: Dict[str, Any]) -> None:
        extra = dict(self._bound)
        extra.update(fields)
        extra.setdefault("event", event)
        _loguru.bind(**extra).log(level, event)
