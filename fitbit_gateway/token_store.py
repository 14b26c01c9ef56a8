"""On-disk storage for the encrypted access token."""

import logging
from pathlib import Path
from typing import Optional

from fitbit_gateway.config import Config
from fitbit_gateway.crypto import decrypt_token, encrypt_token

logger = logging.getLogger(__name__)


class TokenStore:
    """Keeps one access token, encrypted, in a file."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else Config.TOKEN_PATH

    def exists(self) -> bool:
        return self.path.exists()

    def save(self, token: str):
        if not token:
            raise ValueError("Access token must not be empty")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(encrypt_token(token), encoding='utf-8')
        logger.info(f"Saved access token to {self.path}")

    def load(self) -> Optional[str]:
        if not self.exists():
            return None
        return decrypt_token(self.path.read_text(encoding='utf-8').strip())

    def clear(self) -> bool:
        if not self.exists():
            return False
        self.path.unlink()
        logger.info(f"Removed access token at {self.path}")
        return True
