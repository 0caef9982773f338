"""Client configuration and path helpers."""

import os
from dataclasses import dataclass
from pathlib import Path

from .exceptions import ConfigurationError

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "intercom_api.log"

DEFAULT_BASE_URL = "https://api.intercom.io"
DEFAULT_API_VERSION = "2.11"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    """Connection settings for the Intercom REST API."""

    access_token: str
    base_url: str = DEFAULT_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from INTERCOM_* environment variables.

        Raises:
            ConfigurationError: INTERCOM_ACCESS_TOKEN is not set.
        """
        token = os.getenv("INTERCOM_ACCESS_TOKEN")
        if not token:
            raise ConfigurationError("INTERCOM_ACCESS_TOKEN environment variable not set")

        timeout_value = os.getenv("INTERCOM_TIMEOUT")
        try:
            timeout = float(timeout_value) if timeout_value else DEFAULT_TIMEOUT
        except ValueError as e:
            raise ConfigurationError(f"Invalid INTERCOM_TIMEOUT: {timeout_value!r}") from e

        return cls(
            access_token=token,
            base_url=os.getenv("INTERCOM_BASE_URL", DEFAULT_BASE_URL),
            api_version=os.getenv("INTERCOM_API_VERSION", DEFAULT_API_VERSION),
            timeout=timeout,
        )
