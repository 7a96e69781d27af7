# vcr_cassette/domain/cassette.py
"""
Cassette domain model
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Union
from urllib.parse import urlsplit

from vcr_cassette.domain.body import Body
from vcr_cassette.domain.exceptions import ValidationError

Headers = Dict[str, List[str]]
RecorderId = str


class StandardMethod(str, Enum):
    CONNECT = "connect"
    DELETE = "delete"
    GET = "get"
    HEAD = "head"
    OPTIONS = "options"
    PATCH = "patch"
    POST = "post"
    PUT = "put"
    TRACE = "trace"

    def as_str(self) -> str:
        return self.value.upper()


@dataclass(frozen=True)
class OtherMethod:
    """WebDAV and custom methods, kept verbatim."""

    name: str

    def as_str(self) -> str:
        return self.name


Method = Union[StandardMethod, OtherMethod]


def parse_method(text: str) -> Method:
    try:
        return StandardMethod(text.lower())
    except ValueError:
        return OtherMethod(text)


class HttpVersion(str, Enum):
    HTTP_0_9 = "0.9"
    HTTP_1_0 = "1.0"
    HTTP_1_1 = "1.1"
    HTTP_2 = "2"
    HTTP_3 = "3"

    def _rank(self) -> int:
        return list(HttpVersion).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HttpVersion):
            return NotImplemented
        return self._rank() < other._rank()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, HttpVersion):
            return NotImplemented
        return self._rank() <= other._rank()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, HttpVersion):
            return NotImplemented
        return self._rank() > other._rank()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, HttpVersion):
            return NotImplemented
        return self._rank() >= other._rank()


@dataclass(frozen=True)
class Status:
    code: int
    message: str

    def __post_init__(self) -> None:
        if isinstance(self.code, bool) or not isinstance(self.code, int) or not 0 <= self.code <= 0xFFFF:
            raise ValidationError(f"invalid status code {self.code!r}, expected an integer in 0..=65535")


@dataclass(frozen=True)
class Request:
    uri: str
    body: Body
    method: Method
    headers: Headers = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.uri, str):
            raise ValidationError(f"invalid URI {self.uri!r}, expected text")
        try:
            parts = urlsplit(self.uri)
            # raises ValueError for a non-numeric or out-of-range port
            parts.port
        except ValueError as exc:
            raise ValidationError(f"invalid URI {self.uri!r}: {exc}") from exc
        if not parts.scheme or not (parts.netloc or parts.path):
            raise ValidationError(f"invalid URI {self.uri!r}, expected an absolute URI")
        if any(ch.isspace() or not ch.isprintable() for ch in parts.netloc):
            raise ValidationError(f"invalid URI {self.uri!r}, invalid character in authority")


@dataclass(frozen=True)
class Response:
    body: Body
    status: Status
    http_version: Optional[HttpVersion] = None
    headers: Headers = field(default_factory=dict)


@dataclass(frozen=True)
class HttpInteraction:
    request: Request
    response: Response
    recorded_at: datetime


@dataclass(frozen=True)
class Cassette:
    """
    Cassette aggregate root
    """
    http_interactions: List[HttpInteraction]
    recorded_with: RecorderId
