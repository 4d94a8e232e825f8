"""
Application configuration
Read from environment variables (and an optional .env file)
"""
from typing import List, Literal, Optional
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "BookingMX"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    API_PREFIX: str = "/api"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # CORS (the demo frontend runs on the Vite dev server)
    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    # Reservation storage
    RESERVATION_STORE: Literal["memory", "sql"] = "memory"
    DATABASE_URL: str = "sqlite:///./bookingmx.db"

    # City graph
    CITY_DATASET_PATH: Optional[str] = None
    DEFAULT_MAX_DISTANCE_KM: float = 250

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = ConfigDict(env_file=".env", case_sensitive=True)


# Global settings instance
settings = Settings()
