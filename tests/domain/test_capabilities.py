# tests/domain/test_capabilities.py
import pytest

from vcr_cassette.domain.capabilities import ALL_CAPABILITIES, NO_CAPABILITIES, Capabilities


@pytest.mark.parametrize(
    "capabilities, expected",
    [
        (ALL_CAPABILITIES, ("encoding", "string", "matches", "json")),
        (Capabilities(matching=True, json=False), ("encoding", "string", "matches")),
        (Capabilities(matching=False, json=True), ("encoding", "string", "json")),
        (NO_CAPABILITIES, ("encoding", "string")),
    ],
)
def test_accepted_body_fields(capabilities, expected) -> None:
    assert capabilities.accepted_body_fields() == expected


@pytest.mark.parametrize(
    "capabilities, expected",
    [
        (ALL_CAPABILITIES, "matches, json, encoding, or string"),
        (Capabilities(matching=True, json=False), "matches, encoding, or string"),
        (Capabilities(matching=False, json=True), "json, encoding, or string"),
        (NO_CAPABILITIES, "encoding or string"),
    ],
)
def test_missing_body_field_text(capabilities, expected) -> None:
    assert capabilities.missing_body_field_text() == expected
