"""Configuration and environment settings for the Telegram Payment Tracker."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings for the Telegram Payment Tracker."""

    telegram_bot_token: str
    telegram_file_url_template: str = "https://api.telegram.org/file/bot{token}/{file_path}"
    groq_api_key: str
    groq_model: str = "meta-llama/llama-4-scout-17b-16e-instruct"
    groq_temperature: float = 0.1
    groq_max_completion_tokens: int = 1024
    groq_top_p: float = 1.0
    groq_stream: bool = False
    groq_stop: list[str] | None = None
    extraction_variant: str = "structured"
    image_mime_type: str = "image/jpeg"
    http_timeout_seconds: float = 30.0
    database_url: str = "sqlite:///payments.db"
    database_key: str | None = None
    server_host: str = "127.0.0.1"
    server_port: int = Field(default=8000, validation_alias=AliasChoices("PORT", "SERVER_PORT"))
    log_dir: str = "logs"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


def get_settings() -> "Settings":
    """Return an instance of the application settings."""
    return Settings()
