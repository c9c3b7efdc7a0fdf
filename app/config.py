# app/config.py

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "Frota API"
    app_env: str = "development"
    debug: bool = True
    log_level: str = "INFO"
    frontend_url: str = "http://localhost:3000"

    # Supabase
    supabase_url: str
    supabase_service_role_key: str

    # Anthropic (Claude)
    anthropic_api_key: str
    ocr_model: str = "claude-sonnet-4-20250514"
    explanation_model: str = "claude-sonnet-4-20250514"
    ocr_max_tokens: int = 4096

    # Feature flags
    enable_ai_explanations: bool = True
    persist_verification_runs: bool = True

    # Bank verification config
    agaseke_plates: list[str] = ["LDA-25-91-AD", "LDA-25-92-AD", "LDA-25-93-AD"]
    verification_tolerance: float = 1000
    currency: str = "AOA"

    # Invoice matching config
    catalog_match_threshold: float = 0.82
    catalog_language: str = "pt"
    custom_parts_limit: int = 5000

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
