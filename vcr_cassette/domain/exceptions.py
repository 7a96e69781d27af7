# vcr_cassette/domain/exceptions.py
from __future__ import annotations

from typing import Any, Sequence, Tuple, Union

PathItem = Union[str, int]


class CassetteError(Exception):
    """Base class for every error raised by this package."""


class CassetteDecodeError(CassetteError):
    """
    A document node could not be turned into a cassette value.

    `path` locates the failing node from the document root, e.g.
    ("http_interactions", 0, "request", "body").
    """

    def __init__(self, reason: str, path: Sequence[PathItem] = ()) -> None:
        self.reason = reason
        self.path: Tuple[PathItem, ...] = tuple(path)
        super().__init__(self._format())

    def located(self, *prefix: PathItem) -> "CassetteDecodeError":
        """Prepend `prefix` to the path and return self for re-raising."""
        self.path = tuple(prefix) + self.path
        self.args = (self._format(),)
        return self

    def _format(self) -> str:
        if not self.path:
            return self.reason
        return f"at {format_path(self.path)}: {self.reason}"


class ShapeError(CassetteDecodeError):
    def __init__(self, found: Any, expected: str) -> None:
        self.found = describe_node(found)
        self.expected = expected
        super().__init__(f"invalid type: {self.found}, expected {expected}")


class UnrecognizedFieldError(CassetteDecodeError):
    def __init__(self, field: str, expected: Sequence[str]) -> None:
        self.field = field
        self.expected: Tuple[str, ...] = tuple(expected)
        super().__init__(f"unknown field `{field}`, {_expected_text(self.expected)}")


class MissingFieldError(CassetteDecodeError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"missing field `{field}`")


class PatternSyntaxError(CassetteDecodeError):
    def __init__(self, pattern: str, detail: str) -> None:
        self.pattern = pattern
        self.detail = detail
        super().__init__(f"invalid regular expression `{pattern}`: {detail}")


class ValidationError(CassetteDecodeError):
    """An envelope field has the right shape but an unacceptable value."""


class DocumentSyntaxError(CassetteDecodeError):
    """The document text itself is not well-formed JSON/YAML."""


class CapabilityDisabledError(CassetteError):
    def __init__(self, capability: str, variant: str) -> None:
        self.capability = capability
        self.variant = variant
        super().__init__(f"{variant} requires the `{capability}` capability, which is disabled")


class UnsupportedFormatError(CassetteError):
    pass


class ConfigurationError(CassetteError):
    pass


def format_path(path: Sequence[PathItem]) -> str:
    out = ""
    for item in path:
        if isinstance(item, int):
            out += f"[{item}]"
        elif out:
            out += f".{item}"
        else:
            out = str(item)
    return out


def describe_node(value: Any) -> str:
    # bool is an int subclass
    if value is None:
        return "null"
    if isinstance(value, bool):
        return f"boolean `{str(value).lower()}`"
    if isinstance(value, int):
        return f"integer `{value}`"
    if isinstance(value, float):
        return f"floating point `{value}`"
    if isinstance(value, str):
        return f'string "{value}"'
    if isinstance(value, dict):
        return "map"
    if isinstance(value, (list, tuple)):
        return "sequence"
    return type(value).__name__


def _expected_text(expected: Tuple[str, ...]) -> str:
    if not expected:
        return "there are no fields"
    quoted = [f"`{name}`" for name in expected]
    if len(quoted) == 1:
        return f"expected {quoted[0]}"
    if len(quoted) == 2:
        return f"expected {quoted[0]} or {quoted[1]}"
    return "expected one of " + ", ".join(quoted)
