"""
vcr-cassette — VCR cassette codec for Python.

Decodes and encodes recorded HTTP interactions (JSON or YAML) and decides
whether an observed request body satisfies a recorded one.
"""

from vcr_cassette.application.cassette_service import CassetteService
from vcr_cassette.domain import (
    Body,
    BodyMatcher,
    Capabilities,
    Cassette,
    EncodedStringBody,
    Headers,
    HttpInteraction,
    HttpVersion,
    JsonBody,
    MatchersBody,
    Method,
    OtherMethod,
    RegexMatcher,
    Request,
    Response,
    StandardMethod,
    Status,
    StringBody,
    SubstringMatcher,
    is_equivalent_to,
)
from vcr_cassette.domain.exceptions import (
    CapabilityDisabledError,
    CassetteDecodeError,
    CassetteError,
    ConfigurationError,
    DocumentSyntaxError,
    MissingFieldError,
    PatternSyntaxError,
    ShapeError,
    UnrecognizedFieldError,
    UnsupportedFormatError,
    ValidationError,
)
from vcr_cassette.infrastructure.cassette import BodyCodec, CassetteCodec

__version__ = "0.1.0"
__all__ = [
    "CassetteService",
    "BodyCodec",
    "CassetteCodec",
    "Body",
    "StringBody",
    "EncodedStringBody",
    "MatchersBody",
    "JsonBody",
    "BodyMatcher",
    "SubstringMatcher",
    "RegexMatcher",
    "Capabilities",
    "Cassette",
    "HttpInteraction",
    "Request",
    "Response",
    "Status",
    "Headers",
    "Method",
    "StandardMethod",
    "OtherMethod",
    "HttpVersion",
    "is_equivalent_to",
    "CassetteError",
    "CassetteDecodeError",
    "ShapeError",
    "UnrecognizedFieldError",
    "MissingFieldError",
    "PatternSyntaxError",
    "ValidationError",
    "DocumentSyntaxError",
    "CapabilityDisabledError",
    "UnsupportedFormatError",
    "ConfigurationError",
]
