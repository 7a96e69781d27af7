# vcr_cassette/infrastructure/document/format_registry.py
from __future__ import annotations

from typing import Dict

from vcr_cassette.application.ports.document_format import DocumentFormatPort
from vcr_cassette.domain.exceptions import UnsupportedFormatError
from vcr_cassette.infrastructure.document.json_format import JsonDocumentFormat
from vcr_cassette.infrastructure.document.yaml_format import YamlDocumentFormat


class DocumentFormatRegistry:
    def __init__(self) -> None:
        yaml_format = YamlDocumentFormat()
        self._formats: Dict[str, DocumentFormatPort] = {
            "yaml": yaml_format,
            "yml": yaml_format,
            "json": JsonDocumentFormat(),
        }

    def get_format(self, name: str) -> DocumentFormatPort:
        """Look up by format name or file suffix ("json", ".yml", "cassette.yaml")."""
        key = name.lower().rsplit(".", 1)[-1]
        fmt = self._formats.get(key)
        if fmt is None:
            raise UnsupportedFormatError(f"Unsupported cassette format: {name}")
        return fmt

    def register(self, key: str, fmt: DocumentFormatPort) -> None:
        self._formats[key.lower().lstrip(".")] = fmt
