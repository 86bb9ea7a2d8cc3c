# =============================================================================
# core/config.py  —  Runtime Settings
# =============================================================================
#
# All configuration comes from environment variables.  main.py runs
# load_dotenv() before building Settings, so a local .env file works too.
#
#   UNSPLASH_ACCESS_KEY   (required)  Unsplash "Access Key" of your app
#   UNSPLASH_API_BASE     (optional)  defaults to https://api.unsplash.com
#   LOG_LEVEL             (optional)  stderr log level, defaults to INFO
#
# Settings are read ONCE at startup and passed explicitly to whatever needs
# them.  Nothing else in the codebase reads os.environ.
# =============================================================================

from dataclasses import dataclass
import os
from typing import Mapping, Optional

UNSPLASH_API_BASE = "https://api.unsplash.com"
ACCESS_KEY_ENV = "UNSPLASH_ACCESS_KEY"


class ConfigError(Exception):
    """Raised when a required setting is missing or unusable."""


@dataclass(frozen=True)
class Settings:
    access_key: str
    api_base: str = UNSPLASH_API_BASE
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from the environment (``os.environ`` by default).

        Raises:
            ConfigError: if the access key is unset or blank.
        """
        env = os.environ if environ is None else environ

        access_key = env.get(ACCESS_KEY_ENV, "").strip()
        if not access_key:
            raise ConfigError(f"{ACCESS_KEY_ENV} environment variable is not set")

        api_base = env.get("UNSPLASH_API_BASE", "").strip() or UNSPLASH_API_BASE
        log_level = env.get("LOG_LEVEL", "").strip().upper() or "INFO"

        return cls(
            access_key=access_key,
            api_base=api_base.rstrip("/"),
            log_level=log_level,
        )
