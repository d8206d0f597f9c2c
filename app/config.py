# app/config.py

from functools import lru_cache
from typing import List, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
  """
  Application settings read from environment variables (and .env if present).
  Access them through get_settings().
  """

  APP_ENV: Literal["development", "testing", "production"] = Field(
    default="development",
    description="Running stage, drives log level and log file"
  )

  # --- Database
  DATABASE_URL: str = Field(
    default="sqlite:///db/products.db",
    description="SQLAlchemy connection URL"
  )

  # --- CORS whitelist
  CORS_URL_DEVELOPMENT: Optional[str] = Field(default=None, description="Frontend origin used in development")
  CORS_URL_PRODUCTION: Optional[str] = Field(default=None, description="Frontend origin used in production")

  # --- Server
  HOST: str = Field(default="0.0.0.0")
  PORT: int = Field(default=4000, ge=1, le=65535)

  # --- Logging
  LOG_DIR: str = Field(default="logs")

  model_config = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    env_ignore_empty=True,
    extra="ignore",
  )

  @property
  def cors_origins(self) -> List[str]:
    """Whitelisted origins, unset entries dropped."""
    return [origin for origin in (self.CORS_URL_DEVELOPMENT, self.CORS_URL_PRODUCTION) if origin]


@lru_cache
def get_settings() -> Settings:
  return Settings()
