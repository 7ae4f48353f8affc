import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = Field("sqlite:///./pantry_recipes.db", alias="DATABASE_URL")
    admin_secret: str = Field("admin-secret", alias="ADMIN_SECRET")
    ollama_base_url: str = Field("https://ollama.com", alias="OLLAMA_BASE_URL")
    ollama_model: str = Field("gemini-3-flash-preview:cloud", alias="OLLAMA_MODEL")
    ollama_api_key: str | None = Field(None, alias="OLLAMA_API_KEY")
    ollama_timeout_seconds: float = Field(120.0, alias="OLLAMA_TIMEOUT_SECONDS")
    cors_allow_origins: str = Field("*", alias="CORS_ALLOW_ORIGINS")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    normalize_ingredients_on_startup: bool = Field(True, alias="NORMALIZE_INGREDIENTS_ON_STARTUP")

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]


logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    try:
        settings = Settings()
    except PermissionError:
        logger.warning("Unable to read .env; continuing with environment variables only")
        settings = Settings(_env_file=None)
    return settings
