from vcr_cassette.application.ports.document_format import DocumentFormatPort
from vcr_cassette.application.ports.logger import LoggerPort

__all__ = ["DocumentFormatPort", "LoggerPort"]
