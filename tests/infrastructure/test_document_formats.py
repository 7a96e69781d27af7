# tests/infrastructure/test_document_formats.py
from __future__ import annotations

import pytest

from vcr_cassette.domain.exceptions import DocumentSyntaxError, UnsupportedFormatError
from vcr_cassette.infrastructure.document.format_registry import DocumentFormatRegistry
from vcr_cassette.infrastructure.document.json_format import JsonDocumentFormat
from vcr_cassette.infrastructure.document.yaml_format import YamlDocumentFormat


def test_json_parse_keeps_key_order() -> None:
    node = JsonDocumentFormat().parse('{"encoding": "base64", "string": "aGk="}')
    assert list(node) == ["encoding", "string"]


def test_json_parse_error() -> None:
    with pytest.raises(DocumentSyntaxError):
        JsonDocumentFormat().parse('{"http_interactions": [,]}')


def test_yaml_parse_keeps_key_order() -> None:
    node = YamlDocumentFormat().parse("body:\n  string: aGk=\n  encoding: base64\n")
    assert list(node["body"]) == ["string", "encoding"]


def test_yaml_parse_error() -> None:
    with pytest.raises(DocumentSyntaxError):
        YamlDocumentFormat().parse("body: [unclosed\n")


def test_yaml_emit_keeps_key_order_and_quotes_versions() -> None:
    text = YamlDocumentFormat().emit({"body": {"string": "hi", "encoding": None}, "http_version": "1.1"})
    assert text.index("string") < text.index("encoding")
    assert YamlDocumentFormat().parse(text) == {"body": {"string": "hi", "encoding": None}, "http_version": "1.1"}


def test_json_emit_round_trip() -> None:
    fmt = JsonDocumentFormat()
    node = {"json": {"greeting": "héllo"}, "list": [1, None]}
    assert fmt.parse(fmt.emit(node)) == node


class TestDocumentFormatRegistry:
    @pytest.mark.parametrize("name", ["yaml", "yml", ".yaml", "fixtures/example.YML"])
    def test_yaml_names(self, name):
        assert isinstance(DocumentFormatRegistry().get_format(name), YamlDocumentFormat)

    @pytest.mark.parametrize("name", ["json", ".json", "example.json"])
    def test_json_names(self, name):
        assert isinstance(DocumentFormatRegistry().get_format(name), JsonDocumentFormat)

    def test_unsupported(self):
        with pytest.raises(UnsupportedFormatError):
            DocumentFormatRegistry().get_format("cassette.xml")

    def test_register(self):
        registry = DocumentFormatRegistry()
        custom = JsonDocumentFormat(indent=0)
        registry.register(".cassette", custom)
        assert registry.get_format("recording.cassette") is custom
