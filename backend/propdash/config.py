"""
Application configuration
Read from environment variables and an optional .env file
"""
from typing import Dict
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "PropDash"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Load the demo records at startup
    SEED_DEMO_DATA: bool = True

    # Pricing (FCFA)
    RESERVATION_NIGHTLY_RATE: int = 25000
    POOL_SERVICE_PRICES: Dict[str, int] = {
        "lounger": 2500,
        "towel": 500,
        "cabana": 15000,
        "drink": 2000,
        "snack": 3000,
        "parasol": 1500,
    }

    # Notifications kept in the event bus history
    NOTIFICATION_HISTORY_SIZE: int = 100

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
