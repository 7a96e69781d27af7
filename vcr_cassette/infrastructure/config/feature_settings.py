# vcr_cassette/infrastructure/config/feature_settings.py
"""
Capability toggles, resolved once per process.

    VCR_CASSETTE_MATCHING=0   # reject {"matches": [...]} bodies
    VCR_CASSETTE_JSON=false   # reject {"json": ...} bodies

Values come from the environment, falling back to a `.env` file at the
project root.
"""
from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional

import pydantic
from dotenv import dotenv_values
from pydantic import BaseModel, Field

from vcr_cassette.domain.capabilities import Capabilities
from vcr_cassette.domain.exceptions import ConfigurationError

ENV_PREFIX = "VCR_CASSETTE_"
_env_path = Path(__file__).parent.parent.parent.parent / ".env"


class FeatureSettings(BaseModel):
    matching: bool = Field(default=True, description="Enable matcher-list bodies")
    json_body: bool = Field(default=True, alias="json", description="Enable structured JSON bodies")

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        env_file: Optional[Path] = _env_path,
    ) -> "FeatureSettings":
        values = {}
        if env_file is not None and env_file.exists():
            values.update({k: v for k, v in dotenv_values(env_file).items() if v is not None})
        # 環境変数を優先
        values.update(os.environ if environ is None else environ)

        raw = {}
        for name in ("matching", "json"):
            value = values.get(ENV_PREFIX + name.upper())
            if value is not None and value.strip():
                raw[name] = value.strip()
        try:
            return cls.model_validate(raw)
        except pydantic.ValidationError as exc:
            raise ConfigurationError(f"Invalid capability settings: {exc}") from exc

    def to_capabilities(self) -> Capabilities:
        return Capabilities(matching=self.matching, json=self.json_body)


@lru_cache(maxsize=1)
def load_capabilities() -> Capabilities:
    return FeatureSettings.from_env().to_capabilities()
