import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

ENV_PREFIX = "EXPENSE_TRACKER_"


class Settings(BaseModel):
    """Application settings, read from EXPENSE_TRACKER_* environment variables."""
    data_dir: Path
    database_url: str
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    token_expire_hours: int = 24
    cors_origins: list[str] = ["http://localhost:3000"]
    api_prefix: str = "/api/v1"
    log_level: str = "INFO"


def _env(name: str, default: str | None = None) -> str | None:
    return os.environ.get(ENV_PREFIX + name, default)


def _data_dir() -> Path:
    # Use EXPENSE_TRACKER_DATA_DIR if set (e.g. /data in Docker),
    # otherwise fall back to ~/.local/share/expense-tracker
    raw = _env("DATA_DIR")
    return Path(raw) if raw else Path.home() / ".local" / "share" / "expense-tracker"


def ensure_data_dir(settings: Settings) -> None:
    """Ensure the data directory exists."""
    settings.data_dir.mkdir(parents=True, exist_ok=True)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    data_dir = _data_dir()
    origins = _env("CORS_ORIGINS", "http://localhost:3000")
    return Settings(
        data_dir=data_dir,
        database_url=_env("DATABASE_URL", f"sqlite:///{data_dir / 'expenses.db'}"),
        jwt_secret=_env("JWT_SECRET", "change-me-in-production"),
        jwt_algorithm=_env("JWT_ALGORITHM", "HS256"),
        token_expire_hours=int(_env("TOKEN_EXPIRE_HOURS", "24")),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        api_prefix=_env("API_PREFIX", "/api/v1"),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
    )
