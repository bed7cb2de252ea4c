# server/config.py

from functools import lru_cache
from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


load_dotenv()


class Settings(BaseSettings):
    """
    Process-wide configuration, loaded from environment variables and/or a .env file.
    Built once at startup and handed to the components that need it.
    """

    # --- MongoDB ---
    mongodb_uri: str = Field("mongodb://localhost:27017", validation_alias="MONGODB_URI")
    mongodb_database: str = Field("auth_demo", validation_alias="MONGODB_DATABASE")
    users_collection: str = Field("users", validation_alias="MONGODB_USERS_COLLECTION")
    mongodb_timeout_ms: int = Field(5000, validation_alias="MONGODB_TIMEOUT_MS")

    # --- Tokens ---
    jwt_secret_key: str = Field(..., min_length=1, validation_alias="JWT_SECRET_KEY")
    jwt_algorithm: str = Field("HS256", validation_alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(60, validation_alias="ACCESS_TOKEN_EXPIRE_MINUTES")

    # --- Passwords ---
    bcrypt_rounds: int = Field(10, ge=4, le=31, validation_alias="BCRYPT_ROUNDS")

    # --- Server ---
    host: str = Field("0.0.0.0", validation_alias="HOST")
    port: int = Field(3000, validation_alias="PORT")
    cors_origins: list[str] = Field(["*"], validation_alias="CORS_ORIGINS")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
