# vcr_cassette/domain/body.py
"""
Recorded HTTP body values.

A body appears in a cassette in one of four shapes:

    "body": "ohai!"                                   -> StringBody
    "body": {"string": "b2hhaQ==", "encoding": "base64"} -> EncodedStringBody
    "body": {"matches": [{"substring": "ohai"}]}      -> MatchersBody   (matching capability)
    "body": {"json": {"greeting": "ohai"}}            -> JsonBody       (json capability)

`str(body)` gives the human-readable rendering used in diagnostics.
"""
from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple, Union

from vcr_cassette.domain.exceptions import CassetteDecodeError, ShapeError
from vcr_cassette.domain.matcher import BodyMatcher


@dataclass(frozen=True)
class StringBody:
    """Only matches a request body equal to `text`."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class EncodedStringBody:
    """A string plus the encoding it was recorded in (e.g. base64)."""

    string: str
    encoding: Optional[str] = None

    def __str__(self) -> str:
        if self.encoding is not None:
            return f"({self.encoding}){self.string}"
        return self.string


@dataclass(frozen=True)
class MatchersBody:
    """Every matcher must pass against the observed body."""

    matchers: Tuple[BodyMatcher, ...]

    def __init__(self, matchers: Sequence[BodyMatcher]) -> None:
        object.__setattr__(self, "matchers", tuple(matchers))

    def matches(self, text: str) -> bool:
        return all(m.matches(text) for m in self.matchers)

    def __str__(self) -> str:
        return "[" + ", ".join(repr(m) for m in self.matchers) + "]"


@dataclass(frozen=True)
class JsonBody:
    """
    A structured body kept as a full document value (dict/list/scalar).

    The value must be plain JSON: str-keyed dicts, lists, str, int, finite
    float, bool and None. Anything else (YAML dates, `!!binary` bytes, int map
    keys) raises ShapeError located inside the value.

    The value itself is not frozen, so a JsonBody is not hashable; treat the
    value as read-only after construction.
    """

    value: Any

    def __post_init__(self) -> None:
        check_json_value(self.value)

    def render(self) -> str:
        return render_json(self.value)

    def __str__(self) -> str:
        return self.render()


Body = Union[StringBody, EncodedStringBody, MatchersBody, JsonBody]


def check_json_value(value: Any) -> None:
    if value is None or isinstance(value, (str, bool, int)):
        return
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ShapeError(value, "finite JSON number")
        return
    if isinstance(value, list):
        for index, item in enumerate(value):
            try:
                check_json_value(item)
            except CassetteDecodeError as exc:
                raise exc.located(index)
        return
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise ShapeError(key, "JSON object key string")
            try:
                check_json_value(item)
            except CassetteDecodeError as exc:
                raise exc.located(key)
        return
    raise ShapeError(value, "JSON value")


def render_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), sort_keys=True)
