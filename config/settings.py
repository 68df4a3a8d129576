"""
Centralized configuration using pydantic-settings.

How it works:
- Reads environment variables automatically (e.g., MAX_JOBS env var → Settings.MAX_JOBS)
- Falls back to defaults defined here if env vars are not set
- Can also read from a .env file in the project root

The simulator core, the CLI and the API all import `settings` from here
instead of hardcoding values.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

from models.enums import Algorithm


class Settings(BaseSettings):
    # ── PostgreSQL (simulation history) ─────────────────────────
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "cpusched"
    POSTGRES_PASSWORD: str = "cpusched"
    POSTGRES_DB: str = "cpusched"

    # ── Redis (runtime defaults shared by API processes) ────────
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_DB: int = 0

    # ── Scheduler ───────────────────────────────────────────────
    DEFAULT_ALGORITHM: Algorithm = Algorithm.FCFS
    DEFAULT_TIME_QUANTUM: int = Field(2, gt=0)  # time units per Round Robin slice
    MAX_JOBS: Optional[int] = None      # None = no upper bound on the job table
    JOB_NAME_MAX_LENGTH: int = 3        # job names are truncated to this width when parsed
    MAX_BURST_TIME: int = Field(100_000, gt=0)  # upper bound on burst_time accepted by the API

    # ── App ─────────────────────────────────────────────────────
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    @property
    def database_url(self) -> str:
        """Async connection string for FastAPI (uses asyncpg driver)."""
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    @property
    def redis_url(self) -> str:
        return f"redis://{self.REDIS_HOST}:{self.REDIS_PORT}/{self.REDIS_DB}"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton, import this everywhere
settings = Settings()
