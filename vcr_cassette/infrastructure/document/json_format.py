# vcr_cassette/infrastructure/document/json_format.py
from __future__ import annotations

import json
from typing import Any

from vcr_cassette.application.ports.document_format import DocumentFormatPort
from vcr_cassette.domain.exceptions import DocumentSyntaxError


class JsonDocumentFormat(DocumentFormatPort):
    name = "json"

    def __init__(self, indent: int = 2) -> None:
        self._indent = indent

    def parse(self, text: str) -> Any:
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise DocumentSyntaxError(f"invalid JSON: {exc}") from exc

    def emit(self, node: Any) -> str:
        return json.dumps(node, indent=self._indent, ensure_ascii=False)
