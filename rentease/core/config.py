"""
RentEase Application Configuration
Loads settings from .env file using Pydantic v2 with BaseSettings
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # ==================== Project Info ====================
    PROJECT_NAME: str = "RentEase API"
    PROJECT_DESCRIPTION: str = "Property management portal with admin, landlord and tenant dashboards"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"

    # ==================== Storage ====================
    # "sql" keeps collections in the kv_entries table, "memory" keeps them in-process
    STORE_BACKEND: str = "sql"
    DATABASE_URL: str = "sqlite:///rentease_local.db"

    # ==================== Session Tokens ====================
    SECRET_KEY: str = "rentease-dev-secret-change-this-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 10080  # 7 days
    MIN_PASSWORD_LENGTH: int = 6

    # ==================== Domain Rules ====================
    ENFORCE_LEASE_UNIT_AVAILABILITY: bool = True
    SEED_DEMO_DATA: bool = False

    # ==================== CORS & Frontend ====================
    FRONTEND_URL: str = "http://localhost:5173"
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:8080",
        "http://127.0.0.1:5173",
    ]

    # ==================== Server Configuration ====================
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # ==================== Features ====================
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # ==================== Pagination ====================
    MAX_PAGE_SIZE: int = 100

    # ==================== Configuration Loading ====================
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="allow",
        validate_default=True,
    )

    # ==================== Properties ====================
    @property
    def uses_memory_store(self) -> bool:
        """Check if collections live only in process memory"""
        return self.STORE_BACKEND.lower() == "memory"


# ==================== Settings Singleton ====================
@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Create default settings instance
settings = get_settings()


# ==================== Helper Functions ====================
def get_cors_origins() -> List[str]:
    """Get CORS allowed origins"""
    origins = list(settings.ALLOWED_ORIGINS)
    if settings.FRONTEND_URL and settings.FRONTEND_URL not in origins:
        origins.append(settings.FRONTEND_URL)
    return origins


def is_development() -> bool:
    """Check if running in development"""
    return settings.DEBUG or "localhost" in settings.FRONTEND_URL
