"""
Centralized configuration management with validation.

All environment variables are loaded and validated here.
This ensures consistent configuration across the application.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    """Application settings with validation."""

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )

    APP_NAME: str = Field(default="Health Calculator API")

    # API Configuration
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=8000)
    API_RELOAD: bool = Field(default=False)

    # Calculator routes are mounted under this prefix
    HEALTH_CALCULATOR_PREFIX: str = Field(default="/api/healthcalculator")

    # Logging Configuration
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FORMAT: str = Field(default="json")  # json or text

    # Environment
    ENVIRONMENT: str = Field(default="development")
    DEBUG: bool = Field(default=False)
    EXPOSE_API_DOCS: bool = Field(default=True)

    # CORS - comma-separated list of allowed origins for production
    # e.g., "https://calc.example.com,https://www.calc.example.com"
    CORS_ORIGINS: Optional[str] = Field(default=None)

    def cors_origin_list(self) -> list:
        if not self.CORS_ORIGINS:
            return []
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


def validate_production_config(
    environment: str,
    debug: bool,
    cors_origins: Optional[str],
) -> None:
    """
    Refuse to start a production deployment with unsafe settings.

    Raises:
        ValueError: DEBUG enabled or CORS_ORIGINS empty in production
    """
    if environment != "production":
        return

    if debug:
        raise ValueError("DEBUG must be False in production")

    if not cors_origins or not cors_origins.strip():
        raise ValueError("CORS_ORIGINS must be set in production")


# Global settings instance
settings = Settings()
