# vcr_cassette/application/cassette_service.py
from __future__ import annotations

from typing import Optional

from vcr_cassette.application.ports.logger import LoggerPort
from vcr_cassette.domain.body import Body
from vcr_cassette.domain.capabilities import Capabilities
from vcr_cassette.domain.cassette import Cassette
from vcr_cassette.domain.equivalence import is_equivalent_to
from vcr_cassette.domain.exceptions import CassetteError
from vcr_cassette.infrastructure.cassette.cassette_codec import CassetteCodec
from vcr_cassette.infrastructure.config.feature_settings import load_capabilities
from vcr_cassette.infrastructure.document.format_registry import DocumentFormatRegistry
from vcr_cassette.infrastructure.logging.loguru_logger import LoguruLogger


class CassetteService:
    """
    In-memory cassette text <-> Cassette, plus the playback body predicate.

    Capabilities default to the process-wide settings (see feature_settings).
    """

    def __init__(
        self,
        capabilities: Optional[Capabilities] = None,
        formats: Optional[DocumentFormatRegistry] = None,
        logger: Optional[LoggerPort] = None,
    ) -> None:
        self._capabilities = capabilities if capabilities is not None else load_capabilities()
        self._codec = CassetteCodec(self._capabilities)
        self._formats = formats or DocumentFormatRegistry()
        self._logger = (logger or LoguruLogger()).bind(component="cassette")

    @property
    def capabilities(self) -> Capabilities:
        return self._capabilities

    def load(self, text: str, fmt: str = "json") -> Cassette:
        log = self._logger.bind(format=fmt)
        log.debug("cassette.load.start", length=len(text))
        try:
            document = self._formats.get_format(fmt).parse(text)
            cassette = self._codec.load_from_dict(document)
        except CassetteError as exc:
            log.error("cassette.load.failed", error=str(exc), error_type=type(exc).__name__)
            raise
        log.info(
            "cassette.load.done",
            interactions=len(cassette.http_interactions),
            recorded_with=cassette.recorded_with,
        )
        return cassette

    def dump(self, cassette: Cassette, fmt: str = "json") -> str:
        log = self._logger.bind(format=fmt)
        try:
            document = self._codec.dump_to_dict(cassette)
            text = self._formats.get_format(fmt).emit(document)
        except CassetteError as exc:
            log.error("cassette.dump.failed", error=str(exc), error_type=type(exc).__name__)
            raise
        log.info("cassette.dump.done", interactions=len(cassette.http_interactions))
        return text

    def body_matches(self, recorded: Body, observed: Body) -> bool:
        """`recorded` is the cassette body, `observed` the live one; order matters."""
        matched = is_equivalent_to(recorded, observed)
        self._logger.debug(
            "body.match",
            recorded=type(recorded).__name__,
            observed=type(observed).__name__,
            matched=matched,
        )
        return matched
