from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

# .env at the project root: app/core/config.py -> app/core -> app -> root
_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _ROOT / ".env"

DEFAULT_SYSTEM_PROMPT = (
    "You are ARAS AI, an intelligent sales automation assistant. "
    "Help the user with sales strategy and lead generation, voice calling campaigns, "
    "performance analytics, sales conversation optimization and customer targeting. "
    "Answer concisely and professionally."
)


class Settings(BaseSettings):
    # Required, no default
    secret_key: str
    access_token_expire_days: int = 30
    database_url: str = "sqlite:///./aras.db"
    openai_api_key: str = ""
    openai_model: str = "gpt-4"
    openai_timeout: float = 60.0
    # Messages of the session replayed to the model as context
    chat_history_limit: int = 10
    chat_system_prompt: str = DEFAULT_SYSTEM_PROMPT
    # Comma-separated; these emails are registered with the admin role
    admin_emails: str = ""
    cors_origins: str = "*"
    rate_limit_register_per_minute: int = 5
    rate_limit_login_per_minute: int = 10
    log_level: str = "INFO"
    environment: str = "development"

    model_config = {
        "env_file": _ENV_FILE if _ENV_FILE.is_file() else ".env",
        "extra": "ignore",
    }

    @field_validator("secret_key")
    @classmethod
    def secret_key_not_blank(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("SECRET_KEY must be set to a non-empty value.")
        return v

    @field_validator("openai_api_key", mode="before")
    @classmethod
    def strip_openai_key(cls, v: str | None) -> str:
        """Trailing whitespace from copy/paste breaks the Authorization header."""
        return (v or "").strip()


settings = Settings()


def get_admin_emails() -> set[str]:
    return {e.strip().lower() for e in (settings.admin_emails or "").split(",") if e.strip()}


def is_openai_configured() -> bool:
    return bool(settings.openai_api_key)
