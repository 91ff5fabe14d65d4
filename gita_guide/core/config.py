from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import AppSettings, GroqModels, api_key_is_set


class Settings(BaseSettings):
    """Application settings loaded from environment + defaults"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    GROQ_API_KEY: str | None = None
    GROQ_MODEL: GroqModels = AppSettings.GROQ_MODEL
    GROQ_BASE_URL: str = AppSettings.GROQ_BASE_URL
    GROQ_TEMPERATURE: float = Field(
        default=AppSettings.GROQ_TEMPERATURE, ge=0.0, le=2.0)
    REQUEST_TIMEOUT: float = Field(default=AppSettings.REQUEST_TIMEOUT, gt=0)
    API_VERSION: str = AppSettings.API_VERSION
    ENVIRONMENT: str = AppSettings.ENVIRONMENT

    @property
    def has_api_key(self) -> bool:
        return api_key_is_set(self.GROQ_API_KEY)

    @property
    def groq_config(self) -> dict:
        return {
            "api_key": self.GROQ_API_KEY,
            "base_url": self.GROQ_BASE_URL,
            "model": self.GROQ_MODEL.value,
            "temperature": self.GROQ_TEMPERATURE,
            "timeout": self.REQUEST_TIMEOUT,
        }


@lru_cache()
def get_settings() -> Settings:
    return Settings()
