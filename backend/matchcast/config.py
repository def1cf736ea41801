"""Application configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Application
    app_name: str = "matchcast"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:5173"]  # Vite dev server

    # Database
    database_url: str = "sqlite:///./data/matchcast.db"

    # Match source (RapidAPI sportapi)
    sports_api_key: str | None = None
    sports_api_host: str = "sportapi7.p.rapidapi.com"
    sports_api_base_url: str = "https://sportapi7.p.rapidapi.com/api/v1"
    sport: str = "football"
    request_timeout: float = 30.0
    form_results: int = 5

    # LLM gateway (OpenAI-compatible chat completions)
    llm_api_key: str | None = None
    llm_base_url: str = "https://ai.gateway.lovable.dev/v1"
    llm_model: str = "google/gemini-2.5-flash"
    llm_timeout: float = 60.0
    prediction_model_name: str = "Gemini 2.5 Flash (CoT)"
    pending_model_name: str = "Pending"

    # Ingestion pipeline
    retention_days: int = 2
    max_matches_per_run: int = 15
    important_leagues: list[str] = [
        "Premier League",
        "La Liga",
        "Serie A",
        "Bundesliga",
        "Ligue 1",
        "Süper Lig",
        "Champions League",
        "Europa League",
        "Conference League",
        "Championship",
        "Eredivisie",
        "Primeira Liga",
        "MLS",
    ]

    # Throttling (seconds)
    form_fetch_delay: float = 0.3
    rate_limit_delay: float = 3.0
    llm_call_delay: float = 0.8


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
