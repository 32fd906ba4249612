"""
Service settings, read from the environment or a local .env file.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)

    LOG_LEVEL: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"
    # Load the deterministic sample dataset when the service starts
    SEED_ON_STARTUP: bool = True
    TOP_PRODUCTS_LIMIT: int = Field(default=10, ge=0)


settings = Settings()
