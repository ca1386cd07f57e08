import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

DEFAULT_CORS_ORIGINS = [
    "https://journal-app-a193c.web.app",
    "http://localhost:3000",
]


@dataclass
class Settings:
    supabase_url: str = ""
    supabase_key: str = ""
    table_name: str = "entries"
    port: int = 3000
    environment: str = "development"
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    retry_delay: float = 5.0
    retry_multiplier: float = 1.0
    retry_max_delay: Optional[float] = None
    log_level: str = "INFO"

    @property
    def has_database(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)


def _split(value: str) -> List[str]:
    return [v.strip() for v in value.split(",") if v.strip()]


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Read settings from the environment (and a .env file, if any)."""
    load_dotenv(env_file)

    max_delay = os.getenv("DB_RETRY_MAX_DELAY")
    origins = os.getenv("CORS_ORIGINS")

    return Settings(
        supabase_url=os.getenv("SUPABASE_URL", ""),
        supabase_key=os.getenv("SUPABASE_KEY", ""),
        table_name=os.getenv("JOURNAL_TABLE", "entries"),
        port=int(os.getenv("PORT", "3000")),
        environment=os.getenv("APP_ENV", "development"),
        cors_origins=_split(origins) if origins else list(DEFAULT_CORS_ORIGINS),
        retry_delay=float(os.getenv("DB_RETRY_DELAY", "5")),
        retry_multiplier=float(os.getenv("DB_RETRY_MULTIPLIER", "1")),
        retry_max_delay=float(max_delay) if max_delay else None,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
