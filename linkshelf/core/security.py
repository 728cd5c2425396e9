"""
Security utilities for authentication
API key generation and hashing
"""

import secrets
import hashlib
from linkshelf.config import settings


def generate_api_key() -> tuple[str, str]:
    """
    Generate a new API key and its hash

    Returns:
        tuple: (api_key, key_hash)
            - api_key: Full key to show user (only once)
            - key_hash: SHA-256 hash to store in database

    Example:
        >>> key, key_hash = generate_api_key()
        >>> key
        'ls_abc123def456...'
    """
    # Generate secure random token
    random_token = secrets.token_urlsafe(32)

    # Create API key with prefix
    api_key = f"{settings.API_KEY_PREFIX}{random_token}"

    return api_key, hash_api_key(api_key)


def hash_api_key(api_key: str) -> str:
    """
    Hash an API key using SHA-256

    Args:
        api_key: The API key to hash

    Returns:
        str: SHA-256 hash of the key
    """
    return hashlib.sha256(api_key.encode()).hexdigest()
