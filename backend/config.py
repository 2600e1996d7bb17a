# backend/config.py
from pydantic import field_validator
from pydantic_settings import BaseSettings
from typing import ClassVar, Literal
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    SECRET_KEY: str = "dev-secret-change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    DATABASE_URL: str = "sqlite:///./safety_portal.db"

    # "sql" keeps records in DATABASE_URL, "memory" in process-local maps
    STORAGE_BACKEND: Literal["sql", "memory"] = "sql"

    # Fraction of correct answers required to pass an assessment
    PASS_THRESHOLD: float = 0.7
    ENFORCE_STEP_MONOTONIC: bool = False

    SEED_DEMO_DATA: bool = True
    ADMIN_EMAIL: str = "admin@example.com"
    ADMIN_PASSWORD: str = "admin123"
    FRONTEND_URL: str = "http://localhost:5173"
    LOG_LEVEL: str = "INFO"

    @field_validator("PASS_THRESHOLD")
    @classmethod
    def _threshold_range(cls, value: float) -> float:
        if not 0 < value <= 1:
            raise ValueError("PASS_THRESHOLD must be in (0, 1]")
        return value

    class Config:
        env_file: ClassVar[str] = str(env_path)

settings = Settings()
