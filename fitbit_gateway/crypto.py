"""Access token encryption using Fernet."""

import logging
from cryptography.fernet import Fernet

from fitbit_gateway.config import Config

logger = logging.getLogger(__name__)


def get_or_create_key():
    """Key from the environment, else from the key file, else a new one.

    A generated key is written to ``Config.KEY_PATH`` so a stored token
    can still be read by later runs.
    """
    key = Config.ENCRYPTION_KEY
    if key:
        return key.encode() if isinstance(key, str) else key

    if Config.KEY_PATH.exists():
        return Config.KEY_PATH.read_bytes().strip()

    key = Fernet.generate_key()
    Config.KEY_PATH.parent.mkdir(parents=True, exist_ok=True)
    Config.KEY_PATH.write_bytes(key)
    Config.KEY_PATH.chmod(0o600)
    logger.warning(
        f"FITBIT_ENCRYPTION_KEY not set. Generated a new key in {Config.KEY_PATH}; "
        "move it to FITBIT_ENCRYPTION_KEY to keep it out of the data directory."
    )
    return key


def get_fernet():
    """Get Fernet instance with the encryption key."""
    return Fernet(get_or_create_key())


def encrypt_token(token):
    """Encrypt an access token string."""
    if not token:
        return None

    encrypted = get_fernet().encrypt(token.encode())
    return encrypted.decode()


def decrypt_token(encrypted_token):
    """Decrypt an encrypted access token string."""
    if not encrypted_token:
        return None

    try:
        decrypted = get_fernet().decrypt(encrypted_token.encode())
        return decrypted.decode()
    except Exception as e:
        logger.error("Failed to decrypt stored access token")
        raise ValueError(
            "Stored access token cannot be decrypted; check FITBIT_ENCRYPTION_KEY "
            "or run 'token set' again"
        ) from e
