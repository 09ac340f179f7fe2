from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .vocabulary import DEFAULT_LOCALE, normalize_locale


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Storage
    database_url: str = Field(default="sqlite:///./recipes.db")

    # Lexicon
    default_locale: str = Field(default=DEFAULT_LOCALE)

    # API
    suggestion_limit: int = Field(default=10, ge=1, le=100)
    match_limit: int = Field(default=50, ge=1, le=500)
    search_limit: int = Field(default=10, ge=1, le=100)

    # Logging
    log_level: str = Field(default="INFO")

    @field_validator("default_locale", mode="before")
    @classmethod
    def known_locale(cls, v):
        return normalize_locale(v)

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, v):
        return str(v).upper()


settings = Settings()
