from typing import Any

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Dispatch
    callback_timeout_ms: int = 300
    providers: dict[str, str | dict[str, Any]] = {}

    # Page
    page_url: str = "http://localhost/"

    # Sentry
    sentry_dsn: str = ""

    # App
    environment: str = "development"
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "ANALYTICS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


settings = Settings()
