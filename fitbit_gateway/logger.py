"""Logging configuration for fitbit_gateway.

Handlers installed here mask access tokens and the encryption key, so
neither ends up in the daily log file or on the console.
"""

import logging
import re
import sys
from datetime import datetime

from fitbit_gateway.config import Config

REDACTED = '***'

_SECRET_PATTERNS = (
    re.compile(r'(Bearer\s+)[^\s\'",]+'),
    re.compile(r'(FITBIT_ENCRYPTION_KEY=)\S+'),
    re.compile(r'(FITBIT_ACCESS_TOKEN=)\S+'),
)


def redact(message: str) -> str:
    """Replace bearer tokens and key assignments in ``message``."""
    for pattern in _SECRET_PATTERNS:
        message = pattern.sub(rf'\g<1>{REDACTED}', message)
    return message


class SecretFilter(logging.Filter):
    """Rewrites records so credentials never reach a handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        cleaned = redact(message)
        if cleaned != message:
            record.msg = cleaned
            record.args = ()
        return True


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger instance."""
    logger = logging.getLogger(name)

    # Avoid adding handlers if they already exist
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO))
    secret_filter = SecretFilter()

    # Console output shares the terminal with JSON results on stdout
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    console_handler.addFilter(secret_filter)
    logger.addHandler(console_handler)

    Config.ensure_directories()
    log_file = Config.LOGS_DIR / f"fitbit_{datetime.now().strftime('%Y%m%d')}.log"
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_format = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    file_handler.setFormatter(file_format)
    file_handler.addFilter(secret_filter)
    logger.addHandler(file_handler)

    return logger
