from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Outcome Envelope Service"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s [%(request_id)s] %(message)s"

    # CORS
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:8080"]

    # Pagination
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100

    # Redis
    REDIS_URL: str = "redis://redis:6379/0"

    # Cache ("memory" keeps entries in-process; TTL 0 disables)
    CACHE_BACKEND: Literal["redis", "memory"] = "redis"
    CACHE_TTL_SECONDS: int = 60

    # Populate the in-memory store on startup
    SEED_DEMO_DATA: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
