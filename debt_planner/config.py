"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./debt_planner.db"

    # Service
    service_name: str = "debt-planner"
    log_level: str = "INFO"

    # Planning
    recommended_extra_ratio: float = 0.2  # Share of post-minimum monthly income suggested as extra payment

    # Snapshots
    max_snapshot_bytes: int = 1_000_000


settings = Settings()
