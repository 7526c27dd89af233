"""
Configuration settings for the Student Records Portal.

Values are read once from the environment (and an optional .env file)
when the application starts.
"""
import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_MAINTENANCE_MESSAGE = 'System is temporarily unavailable for maintenance.'
DEFAULT_ACTIVE_MESSAGE = 'System is not available at this time.'
DEFAULT_ACTIVE_START_HOUR = 11
DEFAULT_ACTIVE_END_HOUR = 23
DEFAULT_SHEET_TIMEOUT = 30.0
DEFAULT_PORT = 3000


@dataclass(frozen=True)
class Settings:
    maintenance_mode: bool = False
    maintenance_message: str = DEFAULT_MAINTENANCE_MESSAGE
    active_start_hour: int = DEFAULT_ACTIVE_START_HOUR
    active_end_hour: int = DEFAULT_ACTIVE_END_HOUR
    active_message: str = DEFAULT_ACTIVE_MESSAGE
    database_sheet_url: str = ''
    records_sheet_url: str = ''
    sheet_timeout: float = DEFAULT_SHEET_TIMEOUT
    port: int = DEFAULT_PORT
    log_level: str = 'INFO'

    @property
    def active_hours_label(self) -> str:
        return f"{self.active_start_hour}:00 - {self.active_end_hour}:00"


def _read_hour(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name, '').strip()
    if not raw:
        return default
    try:
        hour = int(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default
    if not 0 <= hour <= 23:
        logger.warning(f"Ignoring out of range {name}={hour}, using {default}")
        return default
    return hour


def _read_number(env: Mapping[str, str], name: str, default, cast):
    raw = env.get(name, '').strip()
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default


def _read_log_level(env: Mapping[str, str]) -> str:
    level = (env.get('LOG_LEVEL') or 'INFO').strip().upper()
    if level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        logger.warning(f"Ignoring invalid LOG_LEVEL={level!r}, using INFO")
        return 'INFO'
    return level


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build a Settings object from environment variables.

    When no mapping is given, a .env file in the working directory is
    loaded first (existing variables win) and os.environ is used.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    return Settings(
        maintenance_mode=env.get('MAINTENANCE_MODE', '').strip().lower() == 'true',
        maintenance_message=env.get('MAINTENANCE_MESSAGE') or DEFAULT_MAINTENANCE_MESSAGE,
        active_start_hour=_read_hour(env, 'ACTIVE_START_HOUR', DEFAULT_ACTIVE_START_HOUR),
        active_end_hour=_read_hour(env, 'ACTIVE_END_HOUR', DEFAULT_ACTIVE_END_HOUR),
        active_message=env.get('ACTIVE_MESSAGE') or DEFAULT_ACTIVE_MESSAGE,
        database_sheet_url=env.get('DATABASE_SHEET_URL', '').strip(),
        records_sheet_url=env.get('RECORDS_SHEET_URL', '').strip(),
        sheet_timeout=_read_number(env, 'SHEET_TIMEOUT', DEFAULT_SHEET_TIMEOUT, float),
        port=_read_number(env, 'PORT', DEFAULT_PORT, int),
        log_level=_read_log_level(env),
    )
