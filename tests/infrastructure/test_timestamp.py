# tests/infrastructure/test_timestamp.py
from datetime import datetime, timedelta, timezone

import pytest

from vcr_cassette.domain.exceptions import ShapeError, ValidationError
from vcr_cassette.infrastructure.cassette.timestamp import format_timestamp, parse_timestamp


def test_parse_gmt() -> None:
    assert parse_timestamp("Tue, 01 Nov 2011 04:58:44 GMT") == datetime(2011, 11, 1, 4, 58, 44, tzinfo=timezone.utc)


def test_parse_numeric_offset() -> None:
    parsed = parse_timestamp("Tue, 01 Nov 2011 06:58:44 +0200")
    assert parsed.utcoffset() == timedelta(hours=2)
    assert parsed == datetime(2011, 11, 1, 4, 58, 44, tzinfo=timezone.utc)


def test_parse_unknown_offset_is_utc() -> None:
    parsed = parse_timestamp("Tue, 01 Nov 2011 04:58:44 -0000")
    assert parsed.tzinfo is not None
    assert parsed == datetime(2011, 11, 1, 4, 58, 44, tzinfo=timezone.utc)


def test_format_keeps_offset() -> None:
    value = datetime(2011, 11, 1, 6, 58, 44, tzinfo=timezone(timedelta(hours=2)))
    assert format_timestamp(value) == "Tue, 01 Nov 2011 06:58:44 +0200"


def test_format_naive_as_utc() -> None:
    assert format_timestamp(datetime(2011, 11, 1, 4, 58, 44)) == "Tue, 01 Nov 2011 04:58:44 +0000"


def test_invalid_text() -> None:
    with pytest.raises(ValidationError):
        parse_timestamp("yesterday")


def test_non_text() -> None:
    with pytest.raises(ShapeError):
        parse_timestamp(1320123524)
