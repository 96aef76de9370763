from typing import List

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Temple Booking API"
    API_PREFIX: str = "/api"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3097
    ENVIRONMENT: str = "development"

    # MongoDB (database name is part of the URI)
    MONGODB_URI: str = "mongodb://127.0.0.1:27017/templeBookingsDB"
    MONGODB_DEFAULT_DB: str = "templeBookingsDB"
    MONGODB_COLLECTION: str = "bookings"
    MONGODB_TIMEOUT_MS: int = 5000

    # CORS
    CORS_ORIGINS: List[str] = ["*"]
    CORS_METHODS: List[str] = ["GET", "POST", "PUT", "DELETE"]
    CORS_HEADERS: List[str] = ["Content-Type", "Authorization"]

    # Logging
    LOG_LEVEL: str = "INFO"
    ERROR_LOG_FILE: str = "logs/errors.log"

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
