"""Application configuration."""

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_path: Path = Path("data/foods.json")
    search_limit: int = Field(default=20, ge=1, le=20)
    server_name: str = "cn-food-mcp"
    server_version: str = "1.0.0"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="CN_FOOD_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
