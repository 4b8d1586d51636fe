"""Configuration settings using pydantic-settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""
    
    model_config = SettingsConfigDict(
        env_prefix="BLOOM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Dataset generation
    seed: int = Field(42, description="Seed for the generated company dataset")
    company_count: int = Field(1000, description="Number of companies to generate", ge=1)
    
    # Caching
    cache_dir: str = Field(".cache", description="Directory for disk cache")
    cache_ttl_days: int = Field(7, description="Cache TTL in days")
    
    # Logging
    log_level: str = Field("INFO", description="Logging level")
    
    # Display
    page_size: int = Field(25, description="Default number of rows shown by search", ge=1)
    
    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


# Global settings instance
settings = Settings()
