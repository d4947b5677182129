"""Application configuration"""

from pydantic_settings import BaseSettings
from pydantic import ConfigDict
from functools import lru_cache
from pathlib import Path
from typing import List

# Get the backend directory (parent of app directory)
BACKEND_DIR = Path(__file__).parent.parent
ENV_FILE = BACKEND_DIR / ".env"


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "Burnout Buddy API"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # Storage (JSON documents on local disk)
    DATA_DIR: str = str(BACKEND_DIR / "data")

    # Analytics
    EVENT_LOG_MAX_EVENTS: int = 50_000
    METRICS_TIMEZONE: str = "UTC"

    # Checkout
    STRIPE_PAYMENT_LINK_URL: str = ""
    OFFER_PRICE_USD_MONTHLY: float = 9.9
    OFFER_CTA: str = "전담 AI 코치와 무제한 대화하기"

    # Identity cookie
    USER_ID_COOKIE: str = "bb_uid"
    USER_ID_COOKIE_MAX_AGE: int = 60 * 60 * 24 * 365  # 1 year

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = ConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding='utf-8',
        case_sensitive=True,
        extra="ignore"  # Ignore extra fields in .env
    )

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
