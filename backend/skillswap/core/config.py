from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    database_url: str | None = None
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"
    log_level: str = "INFO"
    ai_enabled: bool = True
    ai_strict_mode: bool = False
    ai_max_retries: int = Field(default=3, ge=1)
    ai_retry_base_delay_seconds: float = Field(default=1.0, ge=0)
    llm_provider: str = "mistral"
    llm_temperature: float = 0.4
    llm_timeout_seconds: float = 45.0
    mistral_api_key: str | None = None
    mistral_model: str = "mistral-small"
    mistral_api_base: str = "https://api.mistral.ai/v1"
    gemini_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("gemini_api_key", "api_key"),
    )
    gemini_model: str = "gemini-2.5-flash"
    gemini_api_base: str = "https://generativelanguage.googleapis.com/v1beta"

    @field_validator("database_url", mode="before")
    @classmethod
    def normalize_database_url(cls, value: str | None) -> str | None:
        # Hosted Postgres/MySQL providers hand out driverless URLs.
        if isinstance(value, str) and value.startswith("postgres://"):
            return "postgresql://" + value[len("postgres://"):]
        if isinstance(value, str) and value.startswith("mysql://"):
            return "mysql+pymysql://" + value[len("mysql://"):]
        return value

    @field_validator("llm_provider", mode="before")
    @classmethod
    def normalize_provider(cls, value: str | None) -> str:
        return (value or "mistral").strip().lower()


@lru_cache
def get_settings() -> Settings:
    return Settings()
