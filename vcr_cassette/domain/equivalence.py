# vcr_cassette/domain/equivalence.py
"""
Playback body matching.

`is_equivalent_to(recorded, observed)` answers "does the observed body satisfy
the body recorded in the cassette?". The relation is intentionally not
symmetric; always pass the cassette body first.

    recorded \\ observed | String            | EncodedString          | Matchers        | Json
    --------------------+-------------------+------------------------+-----------------+-------------------
    String              | equal text        | no encoding, equal     | all match text  | rendering == text
    EncodedString       | no encoding, equal| both fields equal      | False           | False
    Matchers            | all match text    | False                  | False           | all match rendering
    Json                | mirrored: is_equivalent_to(observed, recorded); Json vs Json compares renderings
"""
from __future__ import annotations

from vcr_cassette.domain.body import Body, EncodedStringBody, JsonBody, MatchersBody, StringBody


def is_equivalent_to(recorded: Body, observed: Body) -> bool:
    if isinstance(recorded, StringBody):
        if isinstance(observed, StringBody):
            return recorded.text == observed.text
        if isinstance(observed, EncodedStringBody):
            return observed.encoding is None and recorded.text == observed.string
        if isinstance(observed, MatchersBody):
            return observed.matches(recorded.text)
        if isinstance(observed, JsonBody):
            return observed.render() == recorded.text
        raise TypeError(f"not a body value: {observed!r}")

    if isinstance(recorded, EncodedStringBody):
        if isinstance(observed, StringBody):
            return recorded.encoding is None and recorded.string == observed.text
        if isinstance(observed, EncodedStringBody):
            return recorded.encoding == observed.encoding and recorded.string == observed.string
        if isinstance(observed, (MatchersBody, JsonBody)):
            return False
        raise TypeError(f"not a body value: {observed!r}")

    if isinstance(recorded, MatchersBody):
        if isinstance(observed, StringBody):
            return recorded.matches(observed.text)
        if isinstance(observed, JsonBody):
            return recorded.matches(observed.render())
        if isinstance(observed, (EncodedStringBody, MatchersBody)):
            return False
        raise TypeError(f"not a body value: {observed!r}")

    if isinstance(recorded, JsonBody):
        if isinstance(observed, JsonBody):
            return recorded.render() == observed.render()
        return is_equivalent_to(observed, recorded)

    raise TypeError(f"not a body value: {recorded!r}")
