"""
Link API endpoints
Create, batch insert, text import, update, delete and reorder links
inside collections owned by the authenticated user
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
import logging

from linkshelf.database import get_db
from linkshelf.api.deps import get_current_user, get_catalog_cache
from linkshelf.models.user import User
from linkshelf.models.link import Link
from linkshelf.schemas.collection import ReorderRequest, ReorderResult
from linkshelf.schemas.link import (
    LinkDraft,
    LinkCreate,
    LinkBatchCreate,
    LinkImportRequest,
    LinkUpdate,
    LinkResponse,
    LinkBatchResponse,
)
from linkshelf.services.catalog_cache import PublicCatalogCache
from linkshelf.services.ordering import get_next_link_order_index
from linkshelf.services.ownership import (
    verify_collection_ownership,
    verify_link_ownership,
    touch_collection,
)
from linkshelf.services.reorder_service import reorder_links
from linkshelf.utils.url import parse_bulk_links
from linkshelf.config import settings
from linkshelf.core.exceptions import http_400_bad_request

logger = logging.getLogger(__name__)

router = APIRouter(tags=["links"])


def _insert_links(db: Session, collection_id: str, drafts: List[LinkDraft]) -> List[Link]:
    """Append drafts at the tail of a collection in one transaction"""
    start = get_next_link_order_index(db, collection_id)

    links = [
        Link(
            collection_id=collection_id,
            url=draft.url,
            name=draft.name,
            comment=draft.comment,
            order=start + index,
        )
        for index, draft in enumerate(drafts)
    ]

    db.add_all(links)
    db.flush()
    touch_collection(db, collection_id)
    db.commit()

    for link in links:
        db.refresh(link)

    return links


@router.post("/links", response_model=LinkResponse, status_code=status.HTTP_201_CREATED)
async def create_link(
    link: LinkCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    cache: PublicCatalogCache = Depends(get_catalog_cache)
):
    """
    Create a link at the end of a collection

    Raises:
        PermissionDeniedError: 403 if the collection is not owned by the user
    """
    verify_collection_ownership(db, link.collection_id, current_user.id)

    draft = LinkDraft(url=link.url, name=link.name, comment=link.comment)
    created = _insert_links(db, link.collection_id, [draft])[0]
    cache.invalidate()

    return created


@router.post(
    "/collections/{collection_id}/links/batch",
    response_model=LinkBatchResponse,
    status_code=status.HTTP_201_CREATED
)
async def create_links_batch(
    collection_id: str,
    batch: LinkBatchCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    cache: PublicCatalogCache = Depends(get_catalog_cache)
):
    """
    Append several links in the given order

    Raises:
        PermissionDeniedError: 403 if the collection is not owned by the user
    """
    verify_collection_ownership(db, collection_id, current_user.id)

    links = _insert_links(db, collection_id, batch.links)
    cache.invalidate()

    logger.info(f"Inserted {len(links)} links into collection {collection_id}")
    return LinkBatchResponse(
        count=len(links),
        links=[LinkResponse.model_validate(link) for link in links]
    )


@router.post(
    "/collections/{collection_id}/links/import",
    response_model=LinkBatchResponse,
    status_code=status.HTTP_201_CREATED
)
async def import_links(
    collection_id: str,
    payload: LinkImportRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    cache: PublicCatalogCache = Depends(get_catalog_cache)
):
    """
    Import pasted text, one URL per line

    Lines that are blank or not http(s) URLs are skipped.

    Raises:
        HTTPException: 400 if no line holds a usable URL or too many do
        PermissionDeniedError: 403 if the collection is not owned by the user
    """
    verify_collection_ownership(db, collection_id, current_user.id)

    drafts = [LinkDraft(**parsed) for parsed in parse_bulk_links(payload.text)]

    if not drafts:
        raise http_400_bad_request("No http or https URLs found in the text")

    if len(drafts) > settings.LINK_BATCH_MAX_SIZE:
        raise http_400_bad_request(f"At most {settings.LINK_BATCH_MAX_SIZE} links per import")

    links = _insert_links(db, collection_id, drafts)
    cache.invalidate()

    return LinkBatchResponse(
        count=len(links),
        links=[LinkResponse.model_validate(link) for link in links]
    )


@router.patch("/links/{link_id}", response_model=LinkResponse)
async def update_link(
    link_id: str,
    link_update: LinkUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    cache: PublicCatalogCache = Depends(get_catalog_cache)
):
    """
    Update url, name or comment of a link

    Raises:
        PermissionDeniedError: 403 if the link is missing or not owned by the user
    """
    link = verify_link_ownership(db, link_id, current_user.id)

    for field, value in link_update.model_dump(exclude_unset=True).items():
        if field in ("url", "name") and value is None:
            continue
        setattr(link, field, value)

    db.flush()
    touch_collection(db, link.collection_id)
    db.commit()
    db.refresh(link)
    cache.invalidate()

    return link


@router.delete("/links/{link_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_link(
    link_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    cache: PublicCatalogCache = Depends(get_catalog_cache)
):
    """
    Delete a link

    Raises:
        PermissionDeniedError: 403 if the link is missing or not owned by the user
    """
    link = verify_link_ownership(db, link_id, current_user.id)
    collection_id = link.collection_id

    db.delete(link)
    db.flush()
    touch_collection(db, collection_id)
    db.commit()
    cache.invalidate()

    return None


@router.post("/collections/{collection_id}/links/reorder", response_model=List[ReorderResult])
async def reorder_collection_links(
    collection_id: str,
    reorder: ReorderRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    cache: PublicCatalogCache = Depends(get_catalog_cache)
):
    """
    Apply a new order to the links of a collection

    Returns:
        List of {count} per applied update (empty when nothing changed)

    Raises:
        PermissionDeniedError: 403 if the collection is not owned by the user,
            or any id is not a link of this collection (no writes)
    """
    verify_collection_ownership(db, collection_id, current_user.id)

    results = reorder_links(db, collection_id, reorder.ordered_ids)
    if results:
        cache.invalidate()
    return results
