"""Runtime settings, read from ``RFLINK_*`` environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RFLINK_", env_file=".env", extra="ignore")

    # Logging
    log_level: str = "INFO"

    # Server
    host: str = "127.0.0.1"
    port: int = 8001

    # Request defaults
    default_profile: str = "2L"
    default_frame_aggregation: int = 10
    default_fresnel_clearance_pct: float = 60.0
    default_udp_payload_bytes: int = 1500


@lru_cache()
def get_settings() -> Settings:
    return Settings()
