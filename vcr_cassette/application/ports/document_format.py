# vcr_cassette/application/ports/document_format.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class DocumentFormatPort(ABC):
    """Text <-> structured document node (dict/list/scalars)."""

    name: str = ""

    @abstractmethod
    def parse(self, text: str) -> Any:
        ...

    @abstractmethod
    def emit(self, node: Any) -> str:
        ...
