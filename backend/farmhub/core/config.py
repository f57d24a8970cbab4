"""
Configuration settings for FarmHub
"""
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Database
    # Supabase Postgres: use the direct connection (port 5432), not the pooler (port 6543).
    # SQLite URLs are accepted for local development and tests.
    DATABASE_URL: str = "postgresql://postgres@localhost:5432/farmhub"

    # Application
    APP_NAME: str = "FarmHub"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # Supabase integration
    SUPABASE_URL: Optional[str] = None
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = None
    SUPABASE_ANON_KEY: Optional[str] = None

    # External services
    WEATHER_API_URL: str = "https://api.weatherapi.com/v1"
    WEATHER_API_KEY: Optional[str] = None
    DEFAULT_WEATHER_LOCATION: str = "New York"
    GEOCODING_URL: str = "https://nominatim.openstreetmap.org"
    HTTP_TIMEOUT_SECONDS: float = 10.0

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
