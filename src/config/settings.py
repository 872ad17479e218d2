"""
Centralized settings management using pydantic-settings.

All environment variables and configuration values are defined here.
Use get_settings() to access the cached settings instance.
"""

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Optional environment variables:
        - API_BASE_URL: Storefront API that proxies the search engine
        - SEARCH_PATH: Product search endpoint on that API (default: /api/ms/products)
        - SEARCH_TIMEOUT_SECONDS: Timeout for one search call
        - HOST / PORT: Server bind address
        - ENVIRONMENT: Environment name (development, staging, production)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Environment
    # ==========================================================================
    environment: str = Field(default="development", description="Environment name")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Minimum log level")

    @property
    def is_development(self) -> bool:
        return self.environment.lower() in ("development", "dev", "local")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() in ("production", "prod")

    # ==========================================================================
    # Server Configuration
    # ==========================================================================
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8080, description="Server port")
    workers: int = Field(default=4, description="Number of uvicorn workers")

    cors_origins: List[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ],
        description="Allowed CORS origins",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    # ==========================================================================
    # Storefront Search
    # ==========================================================================
    api_base_url: str = Field(
        default="http://localhost:3000",
        description="Base URL of the storefront API",
    )
    search_path: str = Field(
        default="/api/ms/products",
        description="Product search endpoint, relative to api_base_url",
    )
    search_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for a single product search request (seconds)",
    )

    @field_validator("api_base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v):
        if isinstance(v, str):
            return v.strip().rstrip("/")
        return v

    @field_validator("search_path", mode="before")
    @classmethod
    def ensure_leading_slash(cls, v):
        if isinstance(v, str) and not v.startswith("/"):
            return f"/{v}"
        return v

    @property
    def search_url(self) -> str:
        return f"{self.api_base_url}{self.search_path}"


@lru_cache
def get_settings() -> Settings:
    """
    Get the cached application settings.

    Settings are loaded from environment variables and the project .env file.

    Returns:
        Settings: The application settings instance

    Raises:
        ValidationError: If an environment variable has an invalid value
    """
    env_file = Path(__file__).parent.parent.parent / ".env"
    return Settings(_env_file=env_file if env_file.exists() else None)


def get_settings_for_testing(**overrides) -> Settings:
    """
    Create a settings instance for testing with optional overrides.

    This bypasses the cache to allow different settings in tests.
    """
    test_defaults = {
        "api_base_url": "http://storefront.test",
        "environment": "testing",
        "debug": True,
    }
    test_defaults.update(overrides)

    return Settings(_env_file=None, **test_defaults)
