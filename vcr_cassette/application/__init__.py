from vcr_cassette.application.cassette_service import CassetteService

__all__ = ["CassetteService"]
