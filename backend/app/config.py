"""Application settings loaded from the environment (or a local .env file)."""

import logging
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.utils.constants import DEFAULT_STATE, STATE_TAX_RATES

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Comma separated, e.g. ALLOWED_ORIGINS="https://myapp.com,https://www.myapp.com"
    allowed_origins: str = Field(default="", description="CORS origins; empty allows all")
    default_state: str = Field(default=DEFAULT_STATE, description="State shown when none matches")
    log_level: str = Field(default="INFO", description="Root logging level")

    @field_validator("default_state")
    @classmethod
    def validate_default_state(cls, value: str) -> str:
        if value not in STATE_TAX_RATES:
            raise ValueError(f"Unknown default state: {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper().strip()

    @property
    def cors_origins(self) -> List[str]:
        origins = [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]
        # Public, unauthenticated API: default to permissive CORS
        return origins or ["*"]


@lru_cache()
def get_settings() -> Settings:
    settings = Settings()
    logger.debug("Loaded settings: default_state=%s", settings.default_state)
    return settings
