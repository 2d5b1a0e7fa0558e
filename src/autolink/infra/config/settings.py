"""Application settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    log_level: str = "INFO"
    app_url: str = ""  # Public base URL; required for checkout redirects
    upload_dir: str = "public/images/uploads"
    upload_public_prefix: str = "/images/uploads"
    stripe_secret_key: str = ""
    stripe_timeout_seconds: int = 10
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    openai_timeout_seconds: int = 10

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
        extra="ignore",
    )

    @property
    def payments_enabled(self) -> bool:
        return bool(self.stripe_secret_key)

    @property
    def price_suggestions_enabled(self) -> bool:
        return bool(self.openai_api_key)


@lru_cache
def get_settings() -> Settings:
    """Settings are read once per process (stateless singleton)."""
    return Settings()
