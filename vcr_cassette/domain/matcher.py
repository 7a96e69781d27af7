# vcr_cassette/domain/matcher.py
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Union

from vcr_cassette.domain.exceptions import PatternSyntaxError


@dataclass(frozen=True)
class SubstringMatcher:
    """The body must contain `needle` verbatim."""

    needle: str

    def matches(self, text: str) -> bool:
        return self.needle in text

    def __repr__(self) -> str:
        return f"Substring({self.needle!r})"


@dataclass(frozen=True)
class RegexMatcher:
    """The body must contain a match of `pattern` anywhere (re.search, not fullmatch)."""

    pattern: str
    compiled: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            compiled = re.compile(self.pattern)
        except re.error as exc:
            raise PatternSyntaxError(self.pattern, str(exc)) from exc
        object.__setattr__(self, "compiled", compiled)

    def matches(self, text: str) -> bool:
        return self.compiled.search(text) is not None

    def __repr__(self) -> str:
        return f"Regex({self.pattern!r})"


BodyMatcher = Union[SubstringMatcher, RegexMatcher]
