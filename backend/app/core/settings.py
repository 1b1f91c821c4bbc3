from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    PROJECT_NAME: str = "Content Admin"
    DATABASE_URL: str = "sqlite:///./content_admin.db"

    # Auth Config
    JWT_SECRET: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Security
    PASSWORD_PEPPER: str = ""

    # Session cookie
    COOKIE_NAME: str = "access_token"
    COOKIE_SECURE: bool = False  # set to true when served over HTTPS
    COOKIE_SAMESITE: str = "strict"
    REMEMBER_ME_MAX_AGE_SECONDS: int = 24 * 60 * 60
    ACCEPT_BEARER_HEADER: bool = True

    CORS_ORIGINS: list[str] = ["http://localhost:8080"]
    LOG_LEVEL: str = "INFO"

    # Initial admin, read only by `content-admin admin seed`
    INIT_ADMIN_USERNAME: str | None = None
    INIT_ADMIN_PASSWORD: str | None = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("JWT_SECRET")
    @classmethod
    def _require_secret(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("JWT_SECRET cannot be empty")
        return value

    @field_validator("COOKIE_SAMESITE")
    @classmethod
    def _check_samesite(cls, value: str) -> str:
        value = value.lower()
        if value not in ("strict", "lax", "none"):
            raise ValueError("COOKIE_SAMESITE must be one of strict, lax, none")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from the environment once per process."""
    return Settings()
