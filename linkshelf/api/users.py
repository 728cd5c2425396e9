"""
Public user profile endpoints
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List

from linkshelf.database import get_db
from linkshelf.config import settings
from linkshelf.schemas.catalog import CatalogQuery, CatalogItem
from linkshelf.services.catalog_service import list_user_public_collections

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}/collections", response_model=List[CatalogItem])
async def user_public_collections(
    user_id: str,
    link_limit: int = Query(settings.PUBLIC_CATALOG_DEFAULT_LINK_LIMIT, description="Links per item (clamped to 1-10)"),
    db: Session = Depends(get_db)
):
    """
    Public collections of one user, in that user's order

    Raises:
        NotFoundError: 404 if the user does not exist
    """
    link_limit = CatalogQuery(link_limit=link_limit).link_limit
    return list_user_public_collections(db, user_id, link_limit)
