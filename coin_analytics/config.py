"""
Shared configuration module for the coin analytics engine.
All engine components read tunables from this module.
"""
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
import logging


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    # Application
    APP_NAME: str = "CoinAnalytics"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    # Risk metrics
    RISK_MIN_PRICE_POINTS: int = Field(30, ge=2, description="Minimum cleaned closes for a risk profile")
    RISK_MIN_RETURN_POINTS: int = Field(20, ge=2, description="Minimum returns for a risk profile")
    ANNUALIZATION_DAYS: int = Field(365, ge=1, description="Crypto trades every calendar day")

    # Output
    OUTPUT_DECIMAL_PLACES: int = Field(4, ge=0, le=12)

    # Batch driver
    BATCH_CONCURRENCY: int = 4
    RESULT_CACHE_TTL_SECONDS: int = 300

    @field_validator('BATCH_CONCURRENCY')
    @classmethod
    def validate_batch_concurrency(cls, v: int) -> int:
        """Concurrency cap must allow at least one computation."""
        if v < 1:
            raise ValueError("BATCH_CONCURRENCY must be at least 1")
        return v

    # Redis (optional result cache)
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_DB: int = 0
    REDIS_PASSWORD: str = ""

    # Sentry
    SENTRY_DSN: str = ""
    SENTRY_ENVIRONMENT: str = "development"
    SENTRY_TRACES_SAMPLE_RATE: float = 0.1

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True

    def validate_production_settings(self) -> None:
        """Validate settings for production environment."""
        if self.ENVIRONMENT == "production":
            if self.DEBUG:
                raise ValueError("DEBUG must be False in production")
            if self.RESULT_CACHE_TTL_SECONDS <= 0:
                raise ValueError("RESULT_CACHE_TTL_SECONDS must be positive in production")


def configure_logging(level: str = None) -> None:
    """Apply LOG_LEVEL to the root logger."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


# Global settings instance
settings = Settings()

# Validate settings on import (only in production)
if settings.ENVIRONMENT == "production":
    try:
        settings.validate_production_settings()
    except ValueError as e:
        import sys
        logger = logging.getLogger(__name__)
        logger.critical(f"Production configuration error: {e}", exc_info=True)
        print(f"CRITICAL: Production configuration error: {e}", file=sys.stderr)
        sys.exit(1)
