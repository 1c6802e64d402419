"""Configuration management for Keyset Pager API."""

from typing import List
from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings

from .pagination.paginator import DEFAULT_LIMIT, MIN_LIMIT, MAX_LIMIT


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application settings
    app_name: str = "Keyset Pager API"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS settings
    cors_origins: List[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = ["GET", "POST", "OPTIONS"]
    cors_allow_headers: List[str] = ["*"]

    # Logging settings
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Pagination settings
    default_page_size: int = DEFAULT_LIMIT
    min_page_size: int = MIN_LIMIT
    max_page_size: int = MAX_LIMIT


    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @model_validator(mode="after")
    def validate_page_sizes(self):
        """Ensure min_page_size <= default_page_size <= max_page_size."""
        if self.min_page_size < 1:
            raise ValueError("min_page_size must be one or greater")
        if not self.min_page_size <= self.default_page_size <= self.max_page_size:
            raise ValueError(
                f"Page sizes must satisfy min <= default <= max, got "
                f"{self.min_page_size} <= {self.default_page_size} <= {self.max_page_size}"
            )
        return self

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
        "env_parse_none_str": True,
    }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings."""
    return settings
