from vcr_cassette.domain.body import Body, EncodedStringBody, JsonBody, MatchersBody, StringBody
from vcr_cassette.domain.capabilities import Capabilities
from vcr_cassette.domain.cassette import (
    Cassette,
    Headers,
    HttpInteraction,
    HttpVersion,
    Method,
    OtherMethod,
    Request,
    Response,
    StandardMethod,
    Status,
)
from vcr_cassette.domain.equivalence import is_equivalent_to
from vcr_cassette.domain.matcher import BodyMatcher, RegexMatcher, SubstringMatcher

__all__ = [
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
]
