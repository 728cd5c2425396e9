"""
FastAPI dependencies
Authentication, database session, shared services
"""

from fastapi import Depends, Header
from sqlalchemy.orm import Session
from functools import lru_cache

from linkshelf.database import get_db, utcnow
from linkshelf.models.user import User
from linkshelf.models.api_key import APIKey
from linkshelf.core.security import hash_api_key
from linkshelf.core.exceptions import http_401_unauthorized


async def get_current_user(
    authorization: str = Header(..., description="Bearer token"),
    db: Session = Depends(get_db)
) -> User:
    """
    Get current authenticated user from API key

    Args:
        authorization: Authorization header (format: "Bearer ls_...")
        db: Database session

    Returns:
        User: Authenticated user

    Raises:
        HTTPException: 401 if authentication fails
    """
    if not authorization.startswith("Bearer "):
        raise http_401_unauthorized("Invalid authorization header format")

    api_key = authorization[7:]  # Remove "Bearer " prefix

    if not api_key:
        raise http_401_unauthorized("API key missing")

    api_key_obj = db.query(APIKey).filter(APIKey.key_hash == hash_api_key(api_key)).first()

    if not api_key_obj:
        raise http_401_unauthorized("Invalid API key")

    now = utcnow()
    expires_at = api_key_obj.expires_at
    if expires_at is not None:
        # SQLite hands back naive datetimes
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=now.tzinfo)
        if expires_at < now:
            raise http_401_unauthorized("API key expired")

    api_key_obj.last_used_at = now
    db.commit()

    user = db.query(User).filter(User.id == api_key_obj.user_id).first()

    if not user:
        raise http_401_unauthorized("User not found")

    if not user.is_active:
        raise http_401_unauthorized("User account is inactive")

    return user


# ==============================================================================
# Service Singletons
# ==============================================================================
# The catalog cache is shared process state: one instance per process,
# built from settings on first use. Tests override this dependency.


@lru_cache(maxsize=1)
def get_catalog_cache():
    """
    Get the process-wide PublicCatalogCache

    Returns:
        PublicCatalogCache: Shared catalog cache
    """
    from linkshelf.services.catalog_cache import PublicCatalogCache
    return PublicCatalogCache()
