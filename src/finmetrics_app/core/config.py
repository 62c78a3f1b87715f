"""
Application configuration settings
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Application Settings
    APP_NAME: str = "Small Business Financial Calculator"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    ALLOWED_HOSTS: List[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]

    # Logging
    LOG_LEVEL: str = "INFO"

    # Calculator defaults
    DEFAULT_CURRENCY: str = "EUR"


settings = Settings()
