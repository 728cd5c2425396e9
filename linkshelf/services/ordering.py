"""
Next-position helpers for ordered child sets

New collections and links are appended at the tail of their scope.
Collections start at 0 and links start at 1 when the scope is empty;
the two floors differ and existing data depends on both.
"""

from sqlalchemy import func
from sqlalchemy.orm import Session

from linkshelf.models.collection import Collection
from linkshelf.models.link import Link

COLLECTION_ORDER_FLOOR = 0
LINK_ORDER_FLOOR = 1


def get_next_order_index(db: Session, column, *criteria, floor: int = 0) -> int:
    """
    Return an order value greater than every existing one in scope

    Args:
        db: Database session
        column: Integer order column to inspect (e.g. Link.order)
        *criteria: Filter clauses defining the scope
        floor: Value returned when the scope is empty

    Returns:
        max(order) + 1, or floor if no rows match
    """
    max_order = db.query(func.max(column)).filter(*criteria).scalar()

    if max_order is None:
        return floor

    return max_order + 1


def get_next_collection_order_index(db: Session, user_id: str) -> int:
    """Next position in a user's collection list"""
    return get_next_order_index(
        db, Collection.order, Collection.user_id == user_id, floor=COLLECTION_ORDER_FLOOR
    )


def get_next_link_order_index(db: Session, collection_id: str) -> int:
    """Next position in a collection's link list"""
    return get_next_order_index(
        db, Link.order, Link.collection_id == collection_id, floor=LINK_ORDER_FLOOR
    )
