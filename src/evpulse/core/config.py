"""Configuration management for EVPulse."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    # Reporting
    default_locale: str = Field("en", description="Default report locale (en or id)")

    # Aggregation settings
    trend_bucket_count: int = Field(6, description="Number of sequential buckets for intention trends")
    temporal_period_size: int = Field(5, description="Documents per period in the emotion evolution chart")

    # Ingestion settings
    upload_chunk_size: int = Field(50, description="Documents uploaded per batch chunk")
    max_preview_rows: int = Field(4, description="Raw CSV rows kept in parse diagnostics")

    class Config:
        env_prefix = "EVPULSE_"
        env_file = ".env"
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()
