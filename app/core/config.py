# app/core/config.py
from __future__ import annotations

import json
from typing import List, Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


EnvType = Literal["local", "dev", "staging", "prod"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # App
    APP_NAME: str = "ColombianLeagueStats"
    APP_ENV: EnvType = "local"
    LOG_LEVEL: str = "INFO"

    # CORS (JSON API only; the HTML screens are same-origin)
    CORS_ORIGINS: str | List[str] = Field(
        default="[]",
        description='JSON list or comma-separated origins',
    )

    # API-Football
    API_FOOTBALL_URL: str = Field(
        default="https://v3.football.api-sports.io",
        description="Base URL of the API-Football v3 API",
    )
    API_FOOTBALL_KEY: Optional[str] = Field(default=None, description="Sent as x-apisports-key")
    HTTP_TIMEOUT_SECONDS: float = 30

    # Colombian Primera A, 2023
    LEAGUE_ID: int = 239
    SEASON: int = 2023

    # Dev toggle
    API_FOOTBALL_FAKE_MODE: bool = False

    @property
    def IS_LOCAL(self) -> bool:
        return self.APP_ENV == "local"

    # ---------- Validators ----------

    @field_validator("API_FOOTBALL_URL")
    @classmethod
    def _strip_url(cls, v: str) -> str:
        # allow quoted values from .env
        return str(v).strip().strip('"').strip("'").rstrip("/")

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return str(v).strip().upper() or "INFO"

    @field_validator("CORS_ORIGINS")
    @classmethod
    def _parse_cors(cls, v):
        # Accept JSON list or comma-separated string
        if isinstance(v, list):
            return v
        s = str(v).strip()
        if not s:
            return []
        try:
            parsed = json.loads(s)
            if isinstance(parsed, list):
                return parsed
        except ValueError:
            pass
        # fallback: comma-separated
        return [p.strip() for p in s.split(",") if p.strip()]

    # ---------- Runtime validations ----------

    def validate_at_startup(self) -> None:
        """Fail fast with clear messages for misconfigurations."""
        problems: list[str] = []

        if not self.API_FOOTBALL_URL:
            problems.append("API_FOOTBALL_URL is required.")

        # Key required outside local (where you may use FAKE_MODE)
        if not self.IS_LOCAL and not self.API_FOOTBALL_FAKE_MODE and not self.API_FOOTBALL_KEY:
            problems.append("API_FOOTBALL_KEY is required in non-local env.")

        if problems:
            raise RuntimeError("Config validation failed: " + " ".join(problems))


settings = Settings()
