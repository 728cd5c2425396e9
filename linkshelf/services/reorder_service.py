"""
Reorder Service - apply a caller-supplied order to a set of owned rows

One generic algorithm serves both "reorder my collections" and
"reorder the links of a collection I own":

1. Read every row in the ownership scope (id + current order)
2. Reject the whole request if any given id is outside the scope
3. Schedule an update only where the current order differs from the
   id's position in the given list (its last position if repeated)
4. Apply all scheduled updates in a single transaction

Ids omitted from the list keep their current order. Concurrent reorders
of the same scope are not detected; the last commit wins.
"""

import logging
from typing import Callable, List, Optional, Sequence

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from linkshelf.core.exceptions import PermissionDeniedError
from linkshelf.models.collection import Collection
from linkshelf.models.link import Link
from linkshelf.schemas.collection import ReorderResult
from linkshelf.services.ownership import touch_collection

logger = logging.getLogger(__name__)


def reorder_items(
    db: Session,
    model,
    scope: Sequence,
    ordered_ids: Sequence[str],
    on_applied: Optional[Callable[[Session], None]] = None,
) -> List[ReorderResult]:
    """
    Apply ordered_ids as the new order of rows of `model` within `scope`

    Args:
        db: Database session
        model: Mapped class with `id` and `order` columns
        scope: Filter clauses selecting the rows the caller may reorder
        ordered_ids: Ids in their new order (position i -> order i)
        on_applied: Extra statements to run in the same transaction,
            only when at least one update is scheduled

    Returns:
        One ReorderResult per applied update; empty if nothing changed

    Raises:
        PermissionDeniedError: if any id is outside the scope (no writes happen)
        SQLAlchemyError: if the transaction fails (rolled back, not retried)
    """
    rows = db.execute(select(model.id, model.order).where(*scope)).all()
    current_orders = {str(item_id): order for item_id, order in rows}

    unauthorized = [item_id for item_id in ordered_ids if item_id not in current_orders]
    if unauthorized:
        logger.warning(
            f"Rejected {model.__tablename__} reorder: {len(unauthorized)} id(s) outside scope"
        )
        raise PermissionDeniedError(model.__tablename__, "reorder")

    # A repeated id keeps its last position
    target_orders = {item_id: index for index, item_id in enumerate(ordered_ids)}

    statements = [
        update(model)
        .where(model.id == item_id, *scope)
        .values(order=index)
        for item_id, index in target_orders.items()
        if current_orders[item_id] != index
    ]

    if not statements:
        logger.debug(f"{model.__tablename__} reorder is a no-op")
        return []

    try:
        results = [ReorderResult(count=db.execute(stmt).rowcount) for stmt in statements]
        if on_applied is not None:
            on_applied(db)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    logger.info(f"Reordered {len(results)} {model.__tablename__} row(s)")
    return results


def reorder_collections(db: Session, user_id: str, collection_ids: Sequence[str]) -> List[ReorderResult]:
    """Reorder the collections owned by user_id"""
    return reorder_items(
        db,
        Collection,
        [Collection.user_id == user_id],
        collection_ids,
    )


def reorder_links(db: Session, collection_id: str, link_ids: Sequence[str]) -> List[ReorderResult]:
    """
    Reorder the links of one collection

    The caller must already have verified that it owns the collection.
    The collection's updated_at advances with the reorder.
    """
    return reorder_items(
        db,
        Link,
        [Link.collection_id == collection_id],
        link_ids,
        on_applied=lambda session: touch_collection(session, collection_id),
    )
