from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application Settings
    PROJECT_NAME: str = "Storefront"
    API_V1_PREFIX: str = "/api"
    ENVIRONMENT: str = "development"  # development | test | production
    LOG_LEVEL: str = "INFO"
    BACKEND_CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Loyalty discount rule
    DISCOUNT_EVERY_N_ORDERS: int = 3
    DISCOUNT_PERCENTAGE: float = 0.1
    DISCOUNT_CODE_PREFIX: str = "SAVE10"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
