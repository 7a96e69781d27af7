# vcr_cassette/infrastructure/document/yaml_format.py
from __future__ import annotations

from typing import Any

import yaml

from vcr_cassette.application.ports.document_format import DocumentFormatPort
from vcr_cassette.domain.exceptions import DocumentSyntaxError


class YamlDocumentFormat(DocumentFormatPort):
    name = "yaml"

    def parse(self, text: str) -> Any:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise DocumentSyntaxError(f"invalid YAML: {exc}") from exc

    def emit(self, node: Any) -> str:
        # key order carries meaning for bodies ("string" before "encoding")
        return yaml.safe_dump(node, sort_keys=False, allow_unicode=True, default_flow_style=False)
