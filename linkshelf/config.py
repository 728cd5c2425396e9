"""
Configuration management for Linkshelf API
Uses pydantic-settings for environment variable validation
"""

from pydantic_settings import BaseSettings
from pydantic import model_validator
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Database
    DATABASE_URL: str = "sqlite:///./linkshelf.db"

    # API
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_RELOAD: bool = True
    DEBUG: bool = False

    # Security
    API_KEY_PREFIX: str = "ls_"

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Application
    APP_NAME: str = "Linkshelf"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"  # development or production

    # Public catalog
    PUBLIC_CATALOG_DEFAULT_LIMIT: int = 12
    PUBLIC_CATALOG_MAX_LIMIT: int = 50
    PUBLIC_CATALOG_DEFAULT_LINK_LIMIT: int = 10
    PUBLIC_CATALOG_MAX_LINK_LIMIT: int = 10

    # Public catalog cache (in-process, per replica)
    DISABLE_PUBLIC_CATALOG_CACHE: bool = False
    PUBLIC_CATALOG_CACHE_TTL: int = 60  # seconds
    PUBLIC_CATALOG_CACHE_MAX_ENTRIES: int = 500

    # Links
    LINK_BATCH_MAX_SIZE: int = 100

    # Rate Limiting
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_STORAGE_URI: str = "memory://"
    RATE_LIMIT_CATALOG: str = "120/minute"
    RATE_LIMIT_AUTH: str = "5/minute"

    @model_validator(mode='after')
    def check_catalog_limits(self):
        """Keep catalog defaults inside their bounds"""
        self.PUBLIC_CATALOG_MAX_LIMIT = max(1, self.PUBLIC_CATALOG_MAX_LIMIT)
        self.PUBLIC_CATALOG_MAX_LINK_LIMIT = max(1, self.PUBLIC_CATALOG_MAX_LINK_LIMIT)
        self.PUBLIC_CATALOG_DEFAULT_LIMIT = min(
            max(1, self.PUBLIC_CATALOG_DEFAULT_LIMIT), self.PUBLIC_CATALOG_MAX_LIMIT
        )
        self.PUBLIC_CATALOG_DEFAULT_LINK_LIMIT = min(
            max(1, self.PUBLIC_CATALOG_DEFAULT_LINK_LIMIT), self.PUBLIC_CATALOG_MAX_LINK_LIMIT
        )
        return self

    class Config:
        env_file = ".env"
        case_sensitive = True


# Global settings instance
settings = Settings()
