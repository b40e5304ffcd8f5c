"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_API_URL = "http://localhost:8080"


class Settings(BaseSettings):
    """Application settings."""

    api_url: str = Field(
        default=DEFAULT_API_URL,
        description="Base origin of the task API",
    )

    request_timeout: float | None = Field(
        default=None,
        description="Seconds to wait for an API response (None waits indefinitely)",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = {
        "env_prefix": "MINIKANBAN_",
    }
