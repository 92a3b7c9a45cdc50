"""Pydantic Settings: loads configuration from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings

from src.extraction.renderer import DEFAULT_RENDER_USER_AGENT


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "ignore"}

    openai_api_key: str = ""
    openai_model: str = "gpt-4"
    ad_max_tokens: int = 150

    cors_origin: str = "http://localhost:3000"
    port: int = 5001
    log_level: str = "INFO"

    fetch_timeout_seconds: float = 30.0
    render_timeout_ms: int = 60_000
    static_user_agent: str = "Mozilla/5.0"
    render_user_agent: str = DEFAULT_RENDER_USER_AGENT
    # Fall back to rendering when the static page has no product images
    require_static_images: bool = True


@lru_cache
def get_settings() -> Settings:
    return Settings()
