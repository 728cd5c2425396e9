"""
Public Catalog Service - search, sort and cursor-paginate public collections

Pipeline for one page:
1. Load every public collection with its links (ascending by order)
2. Keep collections whose "name description" contains the search text
3. Sort by the requested key with an id tie-break in the same direction,
   giving a total order even when many rows share a timestamp
4. Project each collection to a CatalogItem with at most link_limit links
5. total_count = size of the filtered set
6. Resume after the cursor id; an unknown cursor restarts at the first item
7. next_cursor = id of the last returned item when more items remain
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional, Union

from sqlalchemy.orm import Session, selectinload

from linkshelf.config import settings
from linkshelf.models.collection import Collection
from linkshelf.models.user import User
from linkshelf.core.exceptions import NotFoundError
from linkshelf.schemas.catalog import CatalogQuery, CatalogItem, CatalogLink, CatalogResponse
from linkshelf.services.catalog_cache import PublicCatalogCache
from linkshelf.utils.normalizers import normalize_description
from linkshelf.utils.url import is_safe_url

logger = logging.getLogger(__name__)


def _to_iso(value: Union[datetime, str]) -> str:
    if isinstance(value, str):
        return value
    return value.isoformat()


def map_collection_to_catalog_item(collection: Collection, link_limit: int) -> CatalogItem:
    """
    Project a collection onto its public catalog shape

    Links are sorted by order, links with non-http(s) URLs are dropped,
    and the rest are truncated to link_limit.

    Args:
        collection: Collection with links loaded
        link_limit: Maximum number of links to embed

    Returns:
        CatalogItem
    """
    links = sorted(collection.links or [], key=lambda link: link.order)
    safe_links = [link for link in links if is_safe_url(link.url)]

    return CatalogItem(
        id=collection.id,
        name=collection.name,
        description=normalize_description(collection.description),
        is_public=True,
        updated_at=_to_iso(collection.updated_at),
        top_links=[
            CatalogLink(
                id=link.id,
                name=link.name,
                url=link.url,
                comment=link.comment,
                order=link.order,
            )
            for link in safe_links[:link_limit]
        ],
    )


def _matches(collection: Collection, needle: str) -> bool:
    haystack = " ".join([collection.name, collection.description or ""]).lower()
    return needle in haystack


def _as_utc(value: datetime) -> datetime:
    # SQLite returns naive UTC values; unflushed edits hold aware ones
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _sort_key(sort_by: str):
    if sort_by == "name":
        return lambda c: (c.name.lower(), c.id)
    return lambda c: (_as_utc(c.updated_at), c.id)


def fetch_public_catalog(db: Session, query: CatalogQuery) -> CatalogResponse:
    """
    Build one page of the public catalog straight from the database

    Args:
        db: Database session
        query: Normalized catalog query

    Returns:
        CatalogResponse with items, next_cursor and total_count
    """
    collections = (
        db.query(Collection)
        .options(selectinload(Collection.links))
        .filter(Collection.is_public.is_(True))
        .all()
    )

    needle = (query.q or "").strip().lower()
    if needle:
        collections = [c for c in collections if _matches(c, needle)]

    ordered = sorted(
        collections,
        key=_sort_key(query.sort_by),
        reverse=query.sort_order == "desc",
    )
    total_count = len(ordered)

    start_index = 0
    if query.cursor:
        for index, collection in enumerate(ordered):
            if collection.id == query.cursor:
                start_index = index + 1
                break
        else:
            logger.debug(f"Catalog cursor {query.cursor} not in result set, restarting")

    page = ordered[start_index:start_index + query.limit]
    has_more = start_index + query.limit < total_count
    next_cursor = page[-1].id if has_more and page else None

    return CatalogResponse(
        items=[map_collection_to_catalog_item(c, query.link_limit) for c in page],
        next_cursor=next_cursor,
        total_count=total_count,
    )


def get_public_catalog(db: Session, query: CatalogQuery, cache: PublicCatalogCache) -> CatalogResponse:
    """
    Cache-through catalog read

    Args:
        db: Database session
        query: Normalized catalog query
        cache: Shared catalog cache

    Returns:
        Cached page on hit, freshly built (and cached) page on miss
    """
    cached = cache.get(query)
    if cached is not None:
        return cached

    response = fetch_public_catalog(db, query)
    cache.set(query, response)
    return response


def get_featured_collection(db: Session, cache: PublicCatalogCache) -> Optional[CatalogItem]:
    """Most recently updated public collection, or None if there is none"""
    catalog = get_public_catalog(
        db,
        CatalogQuery(limit=1, link_limit=settings.PUBLIC_CATALOG_DEFAULT_LINK_LIMIT),
        cache,
    )
    return catalog.items[0] if catalog.items else None


def list_user_public_collections(db: Session, user_id: str, link_limit: int) -> List[CatalogItem]:
    """
    A user's public collections in the user's own order

    Raises:
        NotFoundError: if the user does not exist
    """
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("user", user_id)

    collections = (
        db.query(Collection)
        .options(selectinload(Collection.links))
        .filter(Collection.user_id == user_id, Collection.is_public.is_(True))
        .order_by(Collection.order.asc(), Collection.id.asc())
        .all()
    )

    return [map_collection_to_catalog_item(c, link_limit) for c in collections]
