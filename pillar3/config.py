"""Application settings loaded from the environment.

Variables are prefixed with PILLAR3_ (e.g. PILLAR3_LOG_LEVEL=DEBUG) and may
also come from a local .env file.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Maximum deductible 3a contribution for employees affiliated to a pension fund (2024).
PILLAR_3A_ANNUAL_CAP = 7056.0


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PILLAR3_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    service_name: str = "pillar3-simulator"
    log_level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR)$")
    cors_origins: List[str] = Field(
        default_factory=lambda: [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ]
    )
    pillar_3a_annual_cap: float = Field(default=PILLAR_3A_ANNUAL_CAP, gt=0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
