# vcr_cassette/infrastructure/cassette/cassette_codec.py
"""
Document node <-> Cassette conversion for the envelope records.
Bodies are delegated to BodyCodec; timestamps to the RFC 2822 helpers.
"""
from __future__ import annotations

from typing import Any, Dict, List

from vcr_cassette.domain.capabilities import ALL_CAPABILITIES, Capabilities
from vcr_cassette.domain.cassette import (
    Cassette,
    Headers,
    HttpInteraction,
    HttpVersion,
    Method,
    Request,
    Response,
    StandardMethod,
    Status,
    parse_method,
)
from vcr_cassette.domain.exceptions import (
    CassetteDecodeError,
    MissingFieldError,
    ShapeError,
    ValidationError,
)
from vcr_cassette.infrastructure.cassette.body_codec import BodyCodec
from vcr_cassette.infrastructure.cassette.timestamp import format_timestamp, parse_timestamp


class CassetteCodec:
    def __init__(self, capabilities: Capabilities = ALL_CAPABILITIES) -> None:
        self._body = BodyCodec(capabilities)

    @property
    def body_codec(self) -> BodyCodec:
        return self._body

    def load_from_dict(self, data: Any) -> Cassette:
        """dict からCassetteをロード"""
        data = _expect_map(data, "cassette map")
        interactions_data = _required(data, "http_interactions")
        if not isinstance(interactions_data, list):
            raise ShapeError(interactions_data, "sequence of interactions").located("http_interactions")

        interactions: List[HttpInteraction] = []
        for index, item in enumerate(interactions_data):
            try:
                interactions.append(self._load_interaction(item))
            except CassetteDecodeError as exc:
                raise exc.located("http_interactions", index)

        return Cassette(
            http_interactions=interactions,
            recorded_with=_field(data, "recorded_with", _load_text),
        )

    def dump_to_dict(self, cassette: Cassette) -> Dict[str, Any]:
        return {
            "http_interactions": [self._dump_interaction(i) for i in cassette.http_interactions],
            "recorded_with": cassette.recorded_with,
        }

    def _load_interaction(self, data: Any) -> HttpInteraction:
        data = _expect_map(data, "interaction map")
        return HttpInteraction(
            request=_field(data, "request", self._load_request),
            response=_field(data, "response", self._load_response),
            recorded_at=_field(data, "recorded_at", parse_timestamp),
        )

    def _load_request(self, data: Any) -> Request:
        data = _expect_map(data, "request map")
        uri = _field(data, "uri", _load_text)
        body = _field(data, "body", self._body.decode)
        method = _field(data, "method", _load_method)
        headers = _field(data, "headers", _load_headers)
        try:
            return Request(uri=uri, body=body, method=method, headers=headers)
        except CassetteDecodeError as exc:
            raise exc.located("uri")

    def _load_response(self, data: Any) -> Response:
        data = _expect_map(data, "response map")
        return Response(
            body=_field(data, "body", self._body.decode),
            http_version=_optional_field(data, "http_version", _load_version),
            status=_field(data, "status", _load_status),
            headers=_field(data, "headers", _load_headers),
        )

    def _dump_interaction(self, interaction: HttpInteraction) -> Dict[str, Any]:
        request = interaction.request
        response = interaction.response
        return {
            "request": {
                "uri": request.uri,
                "body": self._body.encode(request.body),
                "method": _dump_method(request.method),
                "headers": _dump_headers(request.headers),
            },
            "response": {
                "body": self._body.encode(response.body),
                "http_version": response.http_version.value if response.http_version else None,
                "status": {"code": response.status.code, "message": response.status.message},
                "headers": _dump_headers(response.headers),
            },
            "recorded_at": format_timestamp(interaction.recorded_at),
        }


def _expect_map(data: Any, expected: str) -> Dict[Any, Any]:
    if not isinstance(data, dict):
        raise ShapeError(data, expected)
    return data


def _required(data: Dict[Any, Any], key: str) -> Any:
    if key not in data:
        raise MissingFieldError(key)
    return data[key]


def _field(data: Dict[Any, Any], key: str, load: Any) -> Any:
    value = _required(data, key)
    try:
        return load(value)
    except CassetteDecodeError as exc:
        raise exc.located(key)


def _optional_field(data: Dict[Any, Any], key: str, load: Any) -> Any:
    value = data.get(key)
    if value is None:
        return None
    try:
        return load(value)
    except CassetteDecodeError as exc:
        raise exc.located(key)


def _load_text(value: Any) -> str:
    if not isinstance(value, str):
        raise ShapeError(value, "string")
    return value


def _load_method(value: Any) -> Method:
    return parse_method(_load_text(value))


def _dump_method(method: Method) -> str:
    if isinstance(method, StandardMethod):
        return method.value
    return method.name


def _load_version(value: Any) -> HttpVersion:
    text = _load_text(value)
    try:
        return HttpVersion(text)
    except ValueError as exc:
        accepted = ", ".join(f"`{v.value}`" for v in HttpVersion)
        raise ValidationError(f"unknown variant `{text}`, expected one of {accepted}") from exc


def _load_status(value: Any) -> Status:
    data = _expect_map(value, "status map")
    code = _required(data, "code")
    if isinstance(code, bool) or not isinstance(code, int):
        raise ShapeError(code, "u16").located("code")
    try:
        status = Status(code=code, message=_field(data, "message", _load_text))
    except ValidationError as exc:
        raise exc.located("code")
    return status


def _load_headers(value: Any) -> Headers:
    data = _expect_map(value, "map of header name to values")
    headers: Headers = {}
    for name, values in data.items():
        if not isinstance(name, str):
            raise ShapeError(name, "header name string")
        if not isinstance(values, list):
            raise ShapeError(values, "sequence of header values").located(name)
        for index, item in enumerate(values):
            if not isinstance(item, str):
                raise ShapeError(item, "header value string").located(name, index)
        headers[name] = list(values)
    return headers


def _dump_headers(headers: Headers) -> Dict[str, List[str]]:
    return {name: list(values) for name, values in headers.items()}
