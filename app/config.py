from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List
import os


class Settings(BaseSettings):
    """Global app settings loaded from environment.
    - Keep defaults light for dev.
    - Override via .env or real env vars.
    """

    APP_NAME: str = "healthchat_functions"
    APP_ENV: str = "dev"
    APP_DEBUG: bool = True

    # Firebase Admin SDK service account; unset falls back to Application Default Credentials
    FIREBASE_CREDENTIALS_FILE: str | None = None
    FIREBASE_PROJECT_ID: str | None = None

    # Shared secret the trigger source sends in X-Trigger-Secret; trigger routes answer 503 while unset
    TRIGGER_SECRET: str | None = None

    # Directory for rotating log files
    LOG_DIR: str = "logs"

    # Raw CORS string from env (comma-separated); parsed via cors_origins property
    CORS_ORIGINS: str | None = None

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def cors_origins(self) -> List[str]:
        """Return CORS origins as a list, parsing comma-separated env string."""
        raw = self.CORS_ORIGINS or os.getenv("CORS_ORIGINS", "") or ""
        return [o.strip() for o in raw.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
