"""
Collection CRUD and reorder API endpoints
All endpoints are scoped to the authenticated owner
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import func
from typing import List
import logging

from linkshelf.database import get_db
from linkshelf.api.deps import get_current_user, get_catalog_cache
from linkshelf.models.user import User
from linkshelf.models.collection import Collection
from linkshelf.models.link import Link
from linkshelf.schemas.collection import (
    CollectionCreate,
    CollectionUpdate,
    CollectionResponse,
    CollectionDetailResponse,
    CollectionListResponse,
    ReorderRequest,
    ReorderResult,
)
from linkshelf.schemas.link import LinkResponse
from linkshelf.services.catalog_cache import PublicCatalogCache
from linkshelf.services.ordering import get_next_collection_order_index
from linkshelf.services.ownership import verify_collection_ownership
from linkshelf.services.reorder_service import reorder_collections
from linkshelf.utils.normalizers import (
    UNSET,
    normalize_description_for_create,
    normalize_description_for_update,
)
from linkshelf.core.exceptions import http_404_not_found

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/collections", tags=["collections"])


def _to_response(collection: Collection, link_count: int) -> CollectionResponse:
    return CollectionResponse(
        id=collection.id,
        user_id=collection.user_id,
        name=collection.name,
        description=collection.description,
        is_public=collection.is_public,
        order=collection.order,
        link_count=link_count,
        created_at=collection.created_at,
        updated_at=collection.updated_at
    )


def _count_links(db: Session, collection_id: str) -> int:
    return db.query(func.count(Link.id)).filter(Link.collection_id == collection_id).scalar()


@router.post("", response_model=CollectionResponse, status_code=status.HTTP_201_CREATED)
async def create_collection(
    collection: CollectionCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    cache: PublicCatalogCache = Depends(get_catalog_cache)
):
    """
    Create a new collection at the end of the owner's list

    Args:
        collection: Collection data (name, description, is_public)
        db: Database session
        current_user: Authenticated user
        cache: Public catalog cache (invalidated)

    Returns:
        CollectionResponse: Created collection
    """
    db_collection = Collection(
        user_id=current_user.id,
        name=collection.name,
        description=normalize_description_for_create(collection.description),
        is_public=collection.is_public,
        order=get_next_collection_order_index(db, current_user.id)
    )

    db.add(db_collection)
    db.commit()
    db.refresh(db_collection)
    cache.invalidate()

    logger.info(f"Created collection {db_collection.id} for user {current_user.id}")
    return _to_response(db_collection, 0)


@router.get("", response_model=CollectionListResponse)
async def list_collections(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    List all collections of the current user, ascending by order

    Returns:
        CollectionListResponse: Collections with link counts
    """
    rows = (
        db.query(Collection, func.count(Link.id))
        .outerjoin(Link, Link.collection_id == Collection.id)
        .filter(Collection.user_id == current_user.id)
        .group_by(Collection.id)
        .order_by(Collection.order.asc(), Collection.id.asc())
        .all()
    )

    return CollectionListResponse(
        data=[_to_response(collection, link_count) for collection, link_count in rows],
        total=len(rows)
    )


@router.get("/{collection_id}", response_model=CollectionDetailResponse)
async def get_collection(
    collection_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get collection by ID with all of its links

    Raises:
        HTTPException: 404 if collection not found or not owned by user
    """
    collection = (
        db.query(Collection)
        .options(selectinload(Collection.links))
        .filter(Collection.id == collection_id, Collection.user_id == current_user.id)
        .first()
    )

    if not collection:
        raise http_404_not_found("Collection not found")

    base = _to_response(collection, len(collection.links))
    return CollectionDetailResponse(
        **base.model_dump(),
        links=[LinkResponse.model_validate(link) for link in collection.links]
    )


@router.patch("/{collection_id}", response_model=CollectionResponse)
async def update_collection(
    collection_id: str,
    collection_update: CollectionUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    cache: PublicCatalogCache = Depends(get_catalog_cache)
):
    """
    Update name, description or visibility

    A null or blank description clears it; omitted fields are left alone.

    Raises:
        PermissionDeniedError: 403 if collection not found or not owned
    """
    collection = verify_collection_ownership(db, collection_id, current_user.id)

    update_data = collection_update.model_dump(exclude_unset=True)

    if update_data.get("name") is not None:
        collection.name = update_data["name"]

    description = normalize_description_for_update(update_data.get("description", UNSET))
    if description is not UNSET:
        collection.description = description

    if update_data.get("is_public") is not None:
        collection.is_public = update_data["is_public"]

    db.commit()
    db.refresh(collection)
    cache.invalidate()

    return _to_response(collection, _count_links(db, collection.id))


@router.delete("/{collection_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_collection(
    collection_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    cache: PublicCatalogCache = Depends(get_catalog_cache)
):
    """
    Delete collection and all its links (cascade delete)

    Raises:
        PermissionDeniedError: 403 if collection not found or not owned
    """
    collection = verify_collection_ownership(db, collection_id, current_user.id)

    db.delete(collection)
    db.commit()
    cache.invalidate()

    logger.info(f"Deleted collection {collection_id}")
    return None


@router.post("/reorder", response_model=List[ReorderResult])
async def reorder_user_collections(
    reorder: ReorderRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    cache: PublicCatalogCache = Depends(get_catalog_cache)
):
    """
    Apply a new order to the current user's collections

    Position in ordered_ids becomes the new order; only changed rows are written.

    Returns:
        List of {count} per applied update (empty when nothing changed)

    Raises:
        PermissionDeniedError: 403 if any id is not owned by the user (no writes)
    """
    results = reorder_collections(db, current_user.id, reorder.ordered_ids)
    if results:
        cache.invalidate()
    return results
