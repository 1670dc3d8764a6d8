"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./balance.db"

    # Service
    service_name: str = "balance-gateway"
    log_level: str = "INFO"

    # Balance history defaults when the query string omits them
    history_default_interval: str = "month"
    history_default_intervals: int = 50


settings = Settings()
