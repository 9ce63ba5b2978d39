from functools import lru_cache
from typing import List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        populate_by_name=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "PrimeKart API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENV: str = "dev"  # Environment: "dev", "staging", "prod"
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    CORS_ORIGINS: List[str] = ["*"]

    # Database (MongoDB)
    MONGODB_URI: str = Field(
        ..., min_length=1, validation_alias=AliasChoices("MONGODB_URI", "MONGO_URI")
    )
    MONGODB_DB_NAME: str = "primekartDB"
    MONGODB_TIMEOUT_MS: int = 5000

    # Security
    SECRET_KEY: str = Field(
        ..., min_length=1, validation_alias=AliasChoices("SECRET_KEY", "JWT_SECRET")
    )
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7
    BCRYPT_ROUNDS: int = Field(10, ge=4, le=31)


@lru_cache()
def get_settings() -> Settings:
    """Load settings once per process. Raises ValidationError when required values are missing."""
    return Settings()
