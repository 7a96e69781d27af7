from vcr_cassette.infrastructure.config.feature_settings import FeatureSettings, load_capabilities

__all__ = ["FeatureSettings", "load_capabilities"]
