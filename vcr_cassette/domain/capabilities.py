# vcr_cassette/domain/capabilities.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

MATCHING = "matching"
JSON = "json"

ENCODING_KEY = "encoding"
STRING_KEY = "string"
MATCHES_KEY = "matches"
JSON_KEY = "json"


@dataclass(frozen=True)
class Capabilities:
    """
    Optional body variants enabled for a process.

    matching: `{"matches": [...]}` bodies and their substring/regex matchers
    json:     `{"json": ...}` bodies holding a structured document value
    """

    matching: bool = True
    json: bool = True

    def accepted_body_fields(self) -> Tuple[str, ...]:
        fields = [ENCODING_KEY, STRING_KEY]
        if self.matching:
            fields.append(MATCHES_KEY)
        if self.json:
            fields.append(JSON_KEY)
        return tuple(fields)

    def missing_body_field_text(self) -> str:
        # optional variants first, e.g. "matches, json, encoding, or string"
        names = []
        if self.matching:
            names.append(MATCHES_KEY)
        if self.json:
            names.append(JSON_KEY)
        names.extend([ENCODING_KEY, STRING_KEY])
        if len(names) == 2:
            return f"{names[0]} or {names[1]}"
        return ", ".join(names[:-1]) + ", or " + names[-1]


ALL_CAPABILITIES = Capabilities()
NO_CAPABILITIES = Capabilities(matching=False, json=False)
