from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest

from vcr_cassette.application.ports.logger import LoggerPort
from vcr_cassette.infrastructure.config.feature_settings import load_capabilities

EXAMPLE_CASSETTE_JSON = """
{
    "http_interactions": [
        {
            "request": {
                "uri": "http://localhost:7777/foo",
                "body": "",
                "method": "get",
                "headers": { "Accept-Encoding": [ "identity" ] }
            },
            "response": {
                "body": "Hello foo",
                "http_version": "1.1",
                "status": { "code": 200, "message": "OK" },
                "headers": {
                    "Date": [ "Thu, 27 Oct 2011 06:16:31 GMT" ],
                    "Content-Type": [ "text/html;charset=utf-8" ],
                    "Content-Length": [ "9" ]
                }
            },
            "recorded_at": "Tue, 01 Nov 2011 04:58:44 GMT"
        }
    ],
    "recorded_with": "VCR 2.0.0"
}
"""


@pytest.fixture
def example_cassette_json() -> str:
    return EXAMPLE_CASSETTE_JSON


@pytest.fixture
def fresh_capabilities():
    load_capabilities.cache_clear()
    yield
    load_capabilities.cache_clear()


class RecordingLogger(LoggerPort):
    """Keeps every event in `records`; bound copies share the same list."""

    def __init__(self, records: Optional[List[Dict[str, Any]]] = None, bound: Optional[Dict[str, Any]] = None) -> None:
        self.records: List[Dict[str, Any]] = records if records is not None else []
        self._bound = dict(bound or {})

    def bind(self, **fields: Any) -> "RecordingLogger":
        merged = dict(self._bound)
        merged.update(fields)
        return RecordingLogger(self.records, merged)

    def debug(self, event: str, **fields: Any) -> None:
        self._emit("debug", event, fields)

    def info(self, event: str, **fields: Any) -> None:
        self._emit("info", event, fields)

    def error(self, event: str, **fields: Any) -> None:
        self._emit("error", event, fields)

    def events(self, event: str) -> List[Dict[str, Any]]:
        return [r for r in self.records if r["type"] == event]

    def _emit(self, level: str, event: str, fields: Dict[str, Any]) -> None:
        payload = dict(self._bound)
        payload.update(fields)
        payload["type"] = event
        payload["level"] = level
        self.records.append(payload)


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()
