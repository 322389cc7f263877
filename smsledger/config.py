"""Settings for the HTTP app and the batch runner.

The parsing engine itself takes no configuration; only the outer surfaces
read these. Values come from ``SMSLEDGER_*`` environment variables or a
``.env`` file.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SMSLEDGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── HTTP API ─────────────────────────────────────────────────────────────
    api_title: str = "SMS Ledger API"
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    max_batch_size: int = Field(1000, ge=1)

    # ── Logging ──────────────────────────────────────────────────────────────
    log_level: Optional[str] = None

    # ── Batch CSV columns ────────────────────────────────────────────────────
    sender_column: str = "address"
    body_column: str = "body"
    timestamp_column: str = "date"


@lru_cache
def get_settings() -> Settings:
    return Settings()
