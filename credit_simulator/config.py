"""Configuration management using Pydantic Settings"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./data/credit_simulator.db"
    create_tables_on_startup: bool = True

    # Service
    service_name: str = "credit-simulator"
    log_level: str = "INFO"

    # History listing (None = return every simulation)
    simulations_list_limit: Optional[int] = None


settings = Settings()
