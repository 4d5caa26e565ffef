from typing import Optional, List
from pydantic_settings import BaseSettings
from pydantic import field_validator, ValidationError
import logging
import sys

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

class Settings(BaseSettings):
    """
    Application Settings

    Every value has a working default so the demo runs without a .env file.
    Override any of them through the environment, e.g.:
    - DATABASE_URL=sqlite+aiosqlite:///./data/crop_disease.db
    - UPLOAD_DIR=/var/lib/cropguard/uploads
    - WEATHER_TIMEOUT=5
    """

    PROJECT_NAME: str = "CropGuard API"
    API_PREFIX: str = "/api"

    # Database Configuration
    DATABASE_URL: str = "sqlite+aiosqlite:///./crop_disease.db"
    DB_ECHO: bool = False

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        return self.DATABASE_URL

    @property
    def SYNC_DATABASE_URI(self) -> str:
        """Driver-less URI for alembic, which runs migrations synchronously"""
        return self.DATABASE_URL.replace("+aiosqlite", "")

    # Upload Configuration
    UPLOAD_DIR: str = "uploads"
    # URL path the upload directory is served under
    UPLOAD_URL_PREFIX: str = "/uploads"
    MAX_UPLOAD_BYTES: int = 5 * 1024 * 1024

    # Weather API Configuration (Open-Meteo, no key required)
    WEATHER_API_URL: str = "https://api.open-meteo.com/v1/forecast"
    WEATHER_TIMEZONE: str = "Asia/Kolkata"
    WEATHER_TIMEOUT: float = 10.0
    WEATHER_MAX_ATTEMPTS: int = 2

    # Notifications (stubbed, nothing is sent)
    NOTIFICATION_DELAY_SECONDS: float = 1.0

    CORS_ORIGINS: List[str] = ["*"]

    # Application Configuration
    ENV_MODE: str = "dev"

    @field_validator('MAX_UPLOAD_BYTES', 'WEATHER_MAX_ATTEMPTS')
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Limits must be strictly positive"""
        if v <= 0:
            raise ValueError("Value must be greater than zero")
        return v

    @field_validator('WEATHER_TIMEOUT', 'NOTIFICATION_DELAY_SECONDS')
    @classmethod
    def validate_non_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError("Value cannot be negative")
        return v

    class Config:
        env_file = ".env"
        env_file_encoding = 'utf-8'
        extra = "ignore"
        case_sensitive = True


def get_settings() -> Settings:
    """
    Get application settings with detailed error reporting.

    Raises:
        SystemExit: If an environment variable holds an invalid value
    """
    try:
        settings = Settings()
        logger.info("✅ Configuration loaded successfully")
        logger.info(f"📊 Environment: {settings.ENV_MODE}")
        logger.info(f"🗄️  Database: {settings.DATABASE_URL}")
        logger.info(f"📁 Uploads: {settings.UPLOAD_DIR} (max {settings.MAX_UPLOAD_BYTES} bytes)")
        logger.info(f"🌦️  Weather API: {settings.WEATHER_API_URL} (timeout {settings.WEATHER_TIMEOUT}s)")
        return settings
    except ValidationError as e:
        logger.error("❌ Configuration validation failed!")
        logger.error("=" * 60)
        logger.error("INVALID ENVIRONMENT VARIABLES:")
        logger.error("=" * 60)

        for error in e.errors():
            field = error['loc'][0] if error['loc'] else "<root>"
            error_type = error['type']
            msg = error['msg']

            logger.error(f"  ❌ {field}")
            logger.error(f"     Type: {error_type}")
            logger.error(f"     Message: {msg}")
            logger.error("")

        logger.error("=" * 60)
        logger.error("Please fix these variables in your .env file or environment")
        logger.error("=" * 60)
        sys.exit(1)
    except Exception as e:
        logger.error(f"❌ Unexpected error loading configuration: {e}")
        sys.exit(1)


# Singleton settings instance
settings: Optional[Settings] = None

def init_settings() -> Settings:
    """Initialize settings (called once at startup)"""
    global settings
    if settings is None:
        settings = get_settings()
    return settings
