from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

CONTENT_DIR = Path(__file__).resolve().parents[2] / "data" / "content"


class Settings(BaseSettings):
    # Content
    VERBS_PATH: Path = CONTENT_DIR / "es" / "verbs.yaml"
    DEFAULT_VERB: str = "amar"
    DRILL_SEED: int | None = None  # Fixed seed makes selections reproducible

    # Backend
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 8000
    APP_DEBUG: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
