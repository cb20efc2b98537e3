"""Configuration management for the application."""
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Configuration
    API_TITLE: str = "Campus Guide Ask API"
    API_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # OpenAI completion backend (the key is checked per request, not at startup)
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    OPENAI_MODEL: str = "gpt-4o-mini"

    # Ask proxy
    ASK_MAX_TOKENS: int = 300
    ASK_TEMPERATURE: float = 0.9
    ASK_TIMEOUT_SECONDS: Optional[float] = None  # None keeps the SDK default

    # Chat client
    ASK_PROXY_URL: str = "http://localhost:8000/api/ask"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore any extra env vars not defined here


settings = Settings()
