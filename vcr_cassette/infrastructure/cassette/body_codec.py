# vcr_cassette/infrastructure/cassette/body_codec.py
"""
Document node <-> Body conversion.

Nodes are plain Python values as produced by json.loads / yaml.safe_load:
dict (insertion-ordered), list, str, int, float, bool, None.

Maps are discriminated by their first key, not by trying every shape, so the
error for a malformed body always names the key that went wrong.
"""
from __future__ import annotations

import copy
from typing import Any, Dict, Iterator, List, Optional, Tuple

from vcr_cassette.domain.body import Body, EncodedStringBody, JsonBody, MatchersBody, StringBody
from vcr_cassette.domain.capabilities import (
    ALL_CAPABILITIES,
    ENCODING_KEY,
    JSON,
    JSON_KEY,
    MATCHES_KEY,
    MATCHING,
    STRING_KEY,
    Capabilities,
)
from vcr_cassette.domain.exceptions import (
    CapabilityDisabledError,
    CassetteDecodeError,
    MissingFieldError,
    ShapeError,
    UnrecognizedFieldError,
)
from vcr_cassette.domain.matcher import BodyMatcher, RegexMatcher, SubstringMatcher

SUBSTRING_KEY = "substring"
REGEX_KEY = "regex"
MATCHER_KEYS = (SUBSTRING_KEY, REGEX_KEY)

_Entries = Iterator[Tuple[Any, Any]]


class BodyCodec:
    def __init__(self, capabilities: Capabilities = ALL_CAPABILITIES) -> None:
        self._capabilities = capabilities

    @property
    def capabilities(self) -> Capabilities:
        return self._capabilities

    def decode(self, node: Any) -> Body:
        if isinstance(node, str):
            return StringBody(node)
        if not isinstance(node, dict):
            raise ShapeError(node, "string or map")

        entries: _Entries = iter(node.items())
        first = next(entries, None)
        if first is None:
            raise MissingFieldError(self._capabilities.missing_body_field_text())

        key, value = first
        body: Body
        if key == ENCODING_KEY:
            encoding = self._decode_encoding(value)
            string = self._decode_string(self._expect_next(entries, STRING_KEY))
            body = EncodedStringBody(string=string, encoding=encoding)
        elif key == STRING_KEY:
            string = self._decode_string(value)
            encoding = self._decode_encoding(self._expect_next(entries, ENCODING_KEY))
            body = EncodedStringBody(string=string, encoding=encoding)
        elif key == MATCHES_KEY and self._capabilities.matching:
            body = MatchersBody(self._decode_matchers(value))
        elif key == JSON_KEY and self._capabilities.json:
            body = self._decode_json(value)
        else:
            raise UnrecognizedFieldError(str(key), self._capabilities.accepted_body_fields())

        self._reject_trailing(entries)
        return body

    def encode(self, body: Body) -> Any:
        if isinstance(body, StringBody):
            return body.text
        if isinstance(body, EncodedStringBody):
            # "string" before "encoding" is part of the wire contract
            return {STRING_KEY: body.string, ENCODING_KEY: body.encoding}
        if isinstance(body, MatchersBody):
            self._require(self._capabilities.matching, MATCHING, "MatchersBody")
            return {MATCHES_KEY: [self.encode_matcher(m) for m in body.matchers]}
        if isinstance(body, JsonBody):
            self._require(self._capabilities.json, JSON, "JsonBody")
            return {JSON_KEY: copy.deepcopy(body.value)}
        raise TypeError(f"not a body value: {body!r}")

    def decode_matcher(self, node: Any) -> BodyMatcher:
        if not isinstance(node, dict):
            raise ShapeError(node, "map with a `substring` or `regex` key")

        entries: _Entries = iter(node.items())
        first = next(entries, None)
        if first is None:
            raise MissingFieldError(f"{SUBSTRING_KEY} or {REGEX_KEY}")

        key, value = first
        if key not in MATCHER_KEYS:
            raise UnrecognizedFieldError(str(key), MATCHER_KEYS)
        if not isinstance(value, str):
            raise ShapeError(value, "string").located(key)
        self._reject_trailing(entries)

        if key == SUBSTRING_KEY:
            return SubstringMatcher(value)
        try:
            return RegexMatcher(value)
        except CassetteDecodeError as exc:
            raise exc.located(key)

    def encode_matcher(self, matcher: BodyMatcher) -> Dict[str, str]:
        if isinstance(matcher, SubstringMatcher):
            return {SUBSTRING_KEY: matcher.needle}
        if isinstance(matcher, RegexMatcher):
            return {REGEX_KEY: matcher.pattern}
        raise TypeError(f"not a body matcher: {matcher!r}")

    def _decode_matchers(self, value: Any) -> List[BodyMatcher]:
        if not isinstance(value, list):
            raise ShapeError(value, "sequence of matchers").located(MATCHES_KEY)
        matchers: List[BodyMatcher] = []
        for index, item in enumerate(value):
            try:
                matchers.append(self.decode_matcher(item))
            except CassetteDecodeError as exc:
                raise exc.located(MATCHES_KEY, index)
        return matchers

    def _decode_json(self, value: Any) -> JsonBody:
        try:
            return JsonBody(copy.deepcopy(value))
        except CassetteDecodeError as exc:
            raise exc.located(JSON_KEY)

    def _decode_encoding(self, value: Any) -> Optional[str]:
        if value is None or isinstance(value, str):
            return value
        raise ShapeError(value, "string or null").located(ENCODING_KEY)

    def _decode_string(self, value: Any) -> str:
        if isinstance(value, str):
            return value
        raise ShapeError(value, "string").located(STRING_KEY)

    def _expect_next(self, entries: _Entries, expected_key: str) -> Any:
        entry = next(entries, None)
        if entry is None:
            raise MissingFieldError(expected_key)
        key, value = entry
        if key != expected_key:
            raise UnrecognizedFieldError(str(key), (expected_key,))
        return value

    def _reject_trailing(self, entries: _Entries) -> None:
        extra = next(entries, None)
        if extra is not None:
            raise UnrecognizedFieldError(str(extra[0]), ())

    def _require(self, enabled: bool, capability: str, variant: str) -> None:
        if not enabled:
            raise CapabilityDisabledError(capability, variant)
