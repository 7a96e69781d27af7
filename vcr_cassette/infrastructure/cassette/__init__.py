# vcr_cassette/infrastructure/cassette/__init__.py
from vcr_cassette.infrastructure.cassette.body_codec import BodyCodec
from vcr_cassette.infrastructure.cassette.cassette_codec import CassetteCodec
from vcr_cassette.infrastructure.cassette.timestamp import format_timestamp, parse_timestamp

__all__ = [
    "BodyCodec",
    "CassetteCodec",
    "format_timestamp",
    "parse_timestamp",
]
