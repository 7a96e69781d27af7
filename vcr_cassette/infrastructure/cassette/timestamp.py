# vcr_cassette/infrastructure/cassette/timestamp.py
"""RFC 2822 timestamps, e.g. "Tue, 01 Nov 2011 04:58:44 GMT"."""
from __future__ import annotations

from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime
from typing import Any

from vcr_cassette.domain.exceptions import ShapeError, ValidationError


def parse_timestamp(text: Any) -> datetime:
    if not isinstance(text, str):
        raise ShapeError(text, "RFC 2822 timestamp string")
    try:
        parsed = parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError) as exc:
        raise ValidationError(f"invalid RFC 2822 timestamp {text!r}") from exc
    if parsed is None:
        raise ValidationError(f"invalid RFC 2822 timestamp {text!r}")
    # "-0000" yields a naive datetime; treat it as UTC
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return format_datetime(value)
