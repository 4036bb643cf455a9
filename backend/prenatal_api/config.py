"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - A missing or blank ANTHROPIC_API_KEY is a valid mode (fallback content only)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Token budgets are settings, not literals in the routes: both endpoints share
      one pipeline and only differ in descriptor values
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Anthropic
    anthropic_api_key: str | None = None
    anthropic_model: str = "claude-sonnet-4-20250514"
    anthropic_timeout_seconds: float = 600.0

    @field_validator("anthropic_api_key", mode="before")
    @classmethod
    def blank_key_is_absent(cls, v: str | None) -> str | None:
        """Deploy targets often export ANTHROPIC_API_KEY="" instead of unsetting it."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # Content endpoints
    development_max_tokens: int = 1000
    exercise_max_tokens: int = 1500

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def llm_configured(self) -> bool:
        return self.anthropic_api_key is not None


@lru_cache
def get_settings() -> Settings:
    return Settings()
