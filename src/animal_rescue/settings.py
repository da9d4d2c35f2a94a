"""
animal_rescue.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide secrets from repr/logging (e.g., JWT secret).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Process-wide configuration, read once at startup.

    The model is frozen: values such as `adoption_request_limit` cannot be
    changed after the app has been built.
    """

    model_config = SettingsConfigDict(
        env_prefix="ANIMAL_RESCUE_",
        case_sensitive=False,
        frozen=True,
    )

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "animal-rescue-backend"
    log_level: str = "INFO"
    # JSON lines for log shipping; set false for a readable console locally.
    log_json: bool = True

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Auth
    jwt_alg: str = "HS256"
    jwt_issuer: str = "animal-rescue"
    jwt_audience: str = "animal-rescue-api"
    jwt_secret: str = Field(default="dev-secret-change-me", repr=False)

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./animal_rescue.db"
    seed_sample_data: bool = True

    # Adoption rules
    adoption_request_limit: int = Field(default=2, ge=0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# The adoption request limit is the only business setting; everything else is
# infrastructure wiring.
