"""
postal_climate.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for both services.
- Hide secrets from repr/logging (e.g., weather API key).
- Offer a cached settings instance for the process entrypoint.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    One settings object serves both services; each entrypoint reads the fields it needs.
    """

    model_config = SettingsConfigDict(
        env_prefix="POSTAL_CLIMATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    env: Literal["dev", "test", "prod"] = "dev"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    input_service_port: int = 8080
    orchestrator_service_port: int = 8081

    # Where the Input Service reaches the Orchestrator Service.
    orchestrator_service_url: str = "http://localhost:8081"

    # Applied to every outbound call (orchestrator, ViaCEP, WeatherAPI).
    http_client_timeout_ms: int = Field(default=5000, gt=0)

    viacep_api_base_url: str = "https://viacep.com.br/ws"
    weather_api_base_url: str = "https://api.weatherapi.com"
    weather_api_key: str = Field(default="", repr=False)

    # Tracing
    otel_enabled: bool = True
    otel_collector_url: str = "localhost:4317"
    otel_connect_timeout_s: float = 3.0

    shutdown_grace_period_s: int = 10

    @property
    def http_client_timeout_s(self) -> float:
        return self.http_client_timeout_ms / 1000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars when several components ask for settings.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Service names are not configurable: they identify spans and log lines and are fixed
# in `postal_climate.api.__main__`.
