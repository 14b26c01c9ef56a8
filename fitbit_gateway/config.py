"""Configuration management for fitbit_gateway."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _get_int_env(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


class Config:
    """Gateway configuration."""

    # Base paths
    BASE_DIR = Path(__file__).parent.parent
    DATA_DIR = BASE_DIR / "data"
    LOGS_DIR = BASE_DIR / "logs"

    # Stored (encrypted) access token
    TOKEN_PATH = DATA_DIR / "token.enc"
    # Generated key, used when FITBIT_ENCRYPTION_KEY is not set
    KEY_PATH = DATA_DIR / "token.key"

    # Security
    ENCRYPTION_KEY = os.environ.get("FITBIT_ENCRYPTION_KEY")

    # Logging
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # API Settings
    API_BASE_URL = os.environ.get("FITBIT_API_BASE_URL", "https://api.fitbit.com")
    API_VERSION = os.environ.get("FITBIT_API_VERSION", "1")
    RESPONSE_FORMAT = os.environ.get("FITBIT_RESPONSE_FORMAT", "json")
    ACCESS_TOKEN = os.environ.get("FITBIT_ACCESS_TOKEN")
    LOCALE = os.environ.get("FITBIT_LOCALE")
    REQUEST_TIMEOUT = _get_int_env("FITBIT_REQUEST_TIMEOUT", 30)  # seconds

    # "-" stands for the user the access token belongs to
    USER_ID = os.environ.get("FITBIT_USER_ID", "-")

    @classmethod
    def ensure_directories(cls):
        """Ensure all required directories exist."""
        cls.DATA_DIR.mkdir(parents=True, exist_ok=True)
        cls.LOGS_DIR.mkdir(parents=True, exist_ok=True)

    def __repr__(self):
        return f"Config(API_BASE_URL={self.API_BASE_URL}, USER_ID={self.USER_ID})"
