# vcr_cassette/infrastructure/document/__init__.py
from vcr_cassette.infrastructure.document.format_registry import DocumentFormatRegistry
from vcr_cassette.infrastructure.document.json_format import JsonDocumentFormat
from vcr_cassette.infrastructure.document.yaml_format import YamlDocumentFormat

__all__ = [
    "DocumentFormatRegistry",
    "JsonDocumentFormat",
    "YamlDocumentFormat",
]
