"""
Runtime Configuration

All settings come from environment variables prefixed with EDUTRACK_ so the
same build can run locally, in CI and in a container without code changes.

Includes:
- Database URL
- Log directory and level
- CORS origins for the web frontend
- Server bind address
"""
import os
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DATA_DIR = Path.home() / ".edutrack"


def _env_flag(name: str, default: str = "false") -> bool:
    """
    Read a boolean flag from the environment.

    Returns:
        True if the variable is set to 'true', '1' or 'yes' (case-insensitive)
    """
    return os.environ.get(name, default).lower() in ("true", "1", "yes")


def get_database_url() -> str:
    url = os.environ.get("EDUTRACK_DATABASE_URL")
    if url:
        return url
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{DATA_DIR / 'edutrack.db'}"


def get_log_dir() -> Path:
    return Path(os.environ.get("EDUTRACK_LOG_DIR", str(DATA_DIR / "logs")))


def get_log_level() -> int:
    level_name = os.environ.get("EDUTRACK_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        logger.warning(f"Unknown log level '{level_name}', falling back to INFO")
        return logging.INFO
    return level


def get_cors_origins() -> list[str]:
    raw = os.environ.get("EDUTRACK_CORS_ORIGINS", "http://localhost:4200,http://localhost:3000")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


DATABASE_URL = get_database_url()
SQL_ECHO = _env_flag("EDUTRACK_SQL_ECHO")
LOG_DIR = get_log_dir()
LOG_LEVEL = get_log_level()
CORS_ORIGINS = get_cors_origins()
HOST = os.environ.get("EDUTRACK_HOST", "0.0.0.0")
PORT = int(os.environ.get("EDUTRACK_PORT", "5000"))
