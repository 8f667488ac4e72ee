from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv


def _load_env() -> None:
    base_path = Path(__file__).resolve()
    candidates = [
        base_path.parents[1] / ".env",  # api/.env
        base_path.parents[2] / ".env",  # repo root .env
    ]
    for path in candidates:
        if path.exists():
            load_dotenv(dotenv_path=path, override=False)
    # As a fallback, load default .env in current working dir
    load_dotenv(override=False)


_load_env()


@dataclass
class Settings:
    # Base
    app_name: str = "justbecause-search-api"
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # CORS/frontends
    cors_origins: list[str] = field(
        default_factory=lambda: os.getenv(
            "CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
        ).split(",")
    )

    # Profile store
    db_url: str = os.getenv("DATABASE_URL", "sqlite:///./dev.db")
    profile_search_limit: int = int(os.getenv("PROFILE_SEARCH_LIMIT", "20"))

    # LLM (optional – keyword fallback if not set)
    openai_api_key: str | None = os.getenv("OPENAI_API_KEY") or None
    openai_base_url: str = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
    openai_model: str = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    openai_timeout: float = float(os.getenv("OPENAI_TIMEOUT", "30"))
    openai_max_tokens: int = int(os.getenv("OPENAI_MAX_TOKENS", "500"))

    # Agent loop
    agent_max_steps: int = int(os.getenv("SEARCH_AGENT_MAX_STEPS", "5"))


def get_settings() -> Settings:
    return Settings()
