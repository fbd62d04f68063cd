import os
from functools import lru_cache

from chatbot.errors import ConfigurationError


def _optional_float(name: str) -> float | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return float(raw)


class Settings:
    """Application configuration values derived from environment variables."""

    def __init__(self) -> None:
        self.google_api_key: str | None = os.getenv("GOOGLE_API_KEY")
        self.gemini_model: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
        self.llm_temperature: float = float(os.getenv("LLM_TEMPERATURE", "0.8"))
        self.llm_max_output_tokens: int = int(
            os.getenv("LLM_MAX_OUTPUT_TOKENS", "300")
        )
        self.llm_timeout_seconds: float | None = _optional_float(
            "LLM_TIMEOUT_SECONDS"
        )
        # Attempts handed to the Gemini client: 1 means the first request only,
        # while 0 makes the client fall back to Google's default retries.
        self.llm_max_retries: int = int(os.getenv("LLM_MAX_RETRIES", "1"))
        self.history_window: int = int(os.getenv("CHAT_HISTORY_WINDOW", "5"))
        if self.history_window < 0:
            raise ValueError("CHAT_HISTORY_WINDOW must not be negative.")
        self.cors_origins: list[str] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def require_google_api_key(self) -> str:
        """Return the configured Google API key, raising if it is missing."""
        if not self.google_api_key:
            raise ConfigurationError(
                "Missing GOOGLE_API_KEY environment variable. "
                "Set it before starting the application."
            )
        return self.google_api_key


@lru_cache
def get_settings() -> Settings:
    """Provide a cached Settings instance."""
    return Settings()


settings = get_settings()
