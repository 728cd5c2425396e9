"""
Public catalog API endpoints
No authentication; served through the shared catalog cache
"""

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session
from typing import Optional, Literal

from linkshelf.database import get_db
from linkshelf.api.deps import get_catalog_cache
from linkshelf.config import settings
from linkshelf.schemas.catalog import CatalogQuery, CatalogItem, CatalogResponse
from linkshelf.services.catalog_cache import PublicCatalogCache
from linkshelf.services.catalog_service import get_public_catalog, get_featured_collection
from linkshelf.middleware.rate_limiter import catalog_rate_limit

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("", response_model=CatalogResponse)
@catalog_rate_limit()
async def public_catalog(
    request: Request,
    q: Optional[str] = Query(None, max_length=200, description="Search text"),
    limit: int = Query(settings.PUBLIC_CATALOG_DEFAULT_LIMIT, description="Page size (clamped to 1-50)"),
    cursor: Optional[str] = Query(None, description="Id of the last item of the previous page"),
    link_limit: int = Query(settings.PUBLIC_CATALOG_DEFAULT_LINK_LIMIT, description="Links per item (clamped to 1-10)"),
    sort_by: Literal["updated_at", "name"] = Query("updated_at"),
    sort_order: Literal["asc", "desc"] = Query("desc"),
    db: Session = Depends(get_db),
    cache: PublicCatalogCache = Depends(get_catalog_cache)
):
    """
    Browse public collections

    Follow next_cursor until it is null to walk the whole catalog.
    An unknown cursor restarts at the first page.

    Returns:
        CatalogResponse: items, next_cursor, total_count
    """
    query = CatalogQuery(
        q=q,
        limit=limit,
        cursor=cursor,
        link_limit=link_limit,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return get_public_catalog(db, query, cache)


@router.get("/featured", response_model=Optional[CatalogItem])
@catalog_rate_limit()
async def featured_collection(
    request: Request,
    db: Session = Depends(get_db),
    cache: PublicCatalogCache = Depends(get_catalog_cache)
):
    """Most recently updated public collection, or null when none exist"""
    return get_featured_collection(db, cache)


@router.get("/cache/stats")
async def catalog_cache_stats(cache: PublicCatalogCache = Depends(get_catalog_cache)):
    """Catalog cache statistics"""
    return cache.get_stats()
