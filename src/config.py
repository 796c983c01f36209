from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings validated via Pydantic.

    Values are loaded from environment variables and/or a .env file.
    """

    # API Keys
    openai_api_key: str = ""

    # Models
    chat_model: str = "gpt-4"
    vision_model: str = "gpt-4o"
    transcription_model: str = "whisper-1"

    # Per-call completion limits
    conversation_summary_max_tokens: int = 150
    document_summary_max_tokens: int = 800
    image_analysis_max_tokens: int = 500

    # Content extraction
    max_content_chars: int = 5000
    summary_input_chars: int = 4000
    fetch_timeout_seconds: float = 10.0
    max_upload_mb: int = 25

    # Fixed seed makes speaker switching reproducible; None draws from OS entropy
    diarization_seed: int | None = None

    # App config
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Gracefully handles missing .env files (e.g. in CI/testing) by falling
    back to environment variables and defaults.
    """
    try:
        return Settings()
    except Exception:
        # If .env is missing or unreadable, build settings from env vars only.
        return Settings(_env_file=None)  # type: ignore[call-arg]


settings = get_settings()
