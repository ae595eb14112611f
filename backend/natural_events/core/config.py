"""Application configuration managed via environment variables."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Natural Events Backend"
    debug: bool = False
    log_level: str = "INFO"
    events_api_base_url: str = "http://localhost:8080/api/events"
    categories_url: str = "https://eonet.gsfc.nasa.gov/api/v3/categories"
    http_timeout_seconds: float = 10.0
    default_event_amount: int = 5
    categories_fetch_on_startup: bool = True
    map_center_lat: float = 20.0
    map_center_lon: float = 0.0
    map_zoom: int = 2
    opik_enabled: bool = False
    opik_api_key: str | None = None
    opik_project: str = "natural-events"


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()


settings = get_settings()
