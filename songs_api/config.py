# ============================================================================
# FILE: songs_api/config.py
# ============================================================================
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    """Application configuration using Pydantic BaseSettings"""

    # App settings
    APP_NAME: str = "Songs API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./songs.db"  # Change to PostgreSQL in production

    # Security
    SECRET_KEY: str = "your-secret-key-change-this-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Pagination
    SONGS_PER_PAGE: int = 50

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
