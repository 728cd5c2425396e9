"""
Ownership checks and parent timestamp maintenance

A link is owned through its parent collection, so every link
mutation both checks the collection owner and advances the
collection's updated_at inside the same transaction.
"""

import logging

from sqlalchemy import update
from sqlalchemy.orm import Session

from linkshelf.database import utcnow
from linkshelf.models.collection import Collection
from linkshelf.models.link import Link
from linkshelf.core.exceptions import PermissionDeniedError

logger = logging.getLogger(__name__)


def verify_collection_ownership(db: Session, collection_id: str, user_id: str) -> Collection:
    """
    Load a collection owned by user_id

    Raises:
        PermissionDeniedError: if the collection is missing or owned by someone else
    """
    collection = db.query(Collection).filter(
        Collection.id == collection_id,
        Collection.user_id == user_id
    ).first()

    if not collection:
        logger.warning(f"User {user_id} denied access to collection {collection_id}")
        raise PermissionDeniedError("collection", "modify")

    return collection


def verify_link_ownership(db: Session, link_id: str, user_id: str) -> Link:
    """
    Load a link whose parent collection is owned by user_id

    Raises:
        PermissionDeniedError: if the link is missing or owned by someone else
    """
    link = db.query(Link).filter(Link.id == link_id).first()

    if not link or not link.collection or link.collection.user_id != user_id:
        logger.warning(f"User {user_id} denied access to link {link_id}")
        raise PermissionDeniedError("link", "modify")

    return link


def touch_collection(db: Session, collection_id: str) -> None:
    """
    Advance a collection's updated_at

    Does not commit; runs inside the caller's transaction.
    """
    db.execute(
        update(Collection)
        .where(Collection.id == collection_id)
        .values(updated_at=utcnow())
    )
