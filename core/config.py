"""
Process configuration, read once from the environment at start-up.
"""
import os
from dataclasses import dataclass
from typing import Optional

from core.constants import DEFAULT_DATABASE_URL, DEFAULT_NAMESPACE
from core.errors import ConfigError

DEFAULT_CREDENTIALS_FILE = 'serviceAccountKey.json'


def _get_env_int(name: str, default: int) -> int:
    """Read integer env var with fallback."""
    value = os.getenv(name, str(default))
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"{name} must be an integer")


@dataclass(frozen=True)
class Settings:
    """Immutable settings for the bot process."""
    bot_token: str
    api_id: int
    api_hash: str
    database_url: str = DEFAULT_DATABASE_URL
    credentials_file: Optional[str] = None
    namespace: str = DEFAULT_NAMESPACE
    store_timeout: Optional[float] = None
    gazetteer_file: Optional[str] = None
    health_port: Optional[int] = None

    @classmethod
    def from_env(cls) -> 'Settings':
        """
        Build settings from environment variables.

        Raises:
            ConfigError: required value missing or malformed
        """
        bot_token = os.getenv('TELEGRAM_BOT_TOKEN', '').strip()
        api_hash = os.getenv('TELEGRAM_API_HASH', '').strip()
        if not bot_token or not api_hash or not os.getenv('TELEGRAM_API_ID'):
            raise ConfigError("TELEGRAM_BOT_TOKEN, TELEGRAM_API_ID, TELEGRAM_API_HASH are required")

        credentials_file = os.getenv('FIREBASE_CREDENTIALS_FILE')
        if not credentials_file and os.path.exists(DEFAULT_CREDENTIALS_FILE):
            credentials_file = DEFAULT_CREDENTIALS_FILE

        timeout = _get_env_int('STORE_TIMEOUT', 0)

        return cls(
            bot_token=bot_token,
            api_id=_get_env_int('TELEGRAM_API_ID', 0),
            api_hash=api_hash,
            database_url=os.getenv('FIREBASE_DATABASE_URL', DEFAULT_DATABASE_URL).rstrip('/'),
            credentials_file=credentials_file or None,
            namespace=os.getenv('FIREBASE_NAMESPACE', DEFAULT_NAMESPACE).strip('/'),
            store_timeout=float(timeout) if timeout > 0 else None,
            gazetteer_file=os.getenv('GAZETTEER_FILE') or None,
            health_port=_get_env_int('HEALTH_CHECK_PORT', 0) or None,
        )
