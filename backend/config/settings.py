"""
Runtime Configuration

Reads service settings from environment variables.

Variables (all optional):
- USERS_API_DATA_DIR: directory for the SQLite database and log files
- USERS_API_DATABASE_URL: SQLAlchemy URL, overrides the SQLite default
- USERS_API_LOG_LEVEL: root log level (DEBUG, INFO, WARNING, ...)
- USERS_API_LOG_TO_FILE: write a rotating log file in the data dir
- USERS_API_UNIQUE_EMAIL_ON_UPDATE: reject updates that move a user onto
  an email owned by another user before hitting the database
- USERS_API_HOST / USERS_API_PORT: bind address for `python main.py`
"""
import os
import logging
from dataclasses import dataclass
from pathlib import Path

from constants import EnvVars, ServerConfig

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path.home() / ".users_api"


def _env_flag(name: str, default: bool) -> bool:
    """
    Read a boolean flag from the environment.

    Returns:
        True if the variable is set to 'true', '1' or 'yes' (case-insensitive),
        the default when it is unset
    """
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ('true', '1', 'yes')


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={raw!r}, using {default}")
        return default


@dataclass(frozen=True)
class Settings:
    """Resolved service settings"""

    data_dir: Path
    database_url: str
    log_level: str
    log_to_file: bool
    unique_email_on_update: bool
    host: str
    port: int

    @property
    def log_file(self) -> Path:
        return self.data_dir / "logs" / "users_api.log"


def get_settings() -> Settings:
    """
    Build settings from the current environment.

    Returns:
        Settings instance
    """
    data_dir = Path(os.environ.get(EnvVars.DATA_DIR) or DEFAULT_DATA_DIR).expanduser()
    database_url = os.environ.get(EnvVars.DATABASE_URL) or f"sqlite:///{data_dir / 'users.db'}"

    return Settings(
        data_dir=data_dir,
        database_url=database_url,
        log_level=os.environ.get(EnvVars.LOG_LEVEL, 'INFO').upper(),
        log_to_file=_env_flag(EnvVars.LOG_TO_FILE, True),
        unique_email_on_update=_env_flag(EnvVars.UNIQUE_EMAIL_ON_UPDATE, False),
        host=os.environ.get(EnvVars.HOST) or ServerConfig.HOST,
        port=_env_int(EnvVars.PORT, ServerConfig.PORT),
    )
