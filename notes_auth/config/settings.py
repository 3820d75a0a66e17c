from functools import lru_cache
from typing import Annotated, List, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Process-wide configuration read from the environment and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    # token signing
    SECRET_KEY: Optional[str] = None
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: Optional[int] = None

    # password hashing
    BCRYPT_ROUNDS: int = 10

    # database
    DEVELOPMENT_ENV: str = "local"
    MONGO_HOST: Optional[str] = None
    MONGO_PORT: str = "27017"
    MONGO_DB: str = "notes"
    MONGO_USER: str = "root"
    MONGO_PASS: str = "example"
    MONGO_CREATE_INDEXES: bool = True

    # logging
    LOG_DIR: str = "logs"
    LOG_SERVICE_URL: Optional[str] = None

    # http
    CORS_ORIGINS: Annotated[List[str], NoDecode] = ["*"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def split_cors_origins(cls, v):
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @property
    def MONGO_URI(self) -> str:
        if self.DEVELOPMENT_ENV == "docker":
            host = self.MONGO_HOST or "mongo"
            return f"mongodb://{self.MONGO_USER}:{self.MONGO_PASS}@{host}:{self.MONGO_PORT}/"
        host = self.MONGO_HOST or "localhost"
        return f"mongodb://{host}:{self.MONGO_PORT}/{self.MONGO_DB}"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
