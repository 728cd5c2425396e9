"""
Pydantic Schemas for Request/Response Validation

Collection Schemas:
    - CollectionCreate: POST /collections
    - CollectionUpdate: PATCH /collections/{id}
    - CollectionResponse / CollectionDetailResponse / CollectionListResponse
    - ReorderRequest / ReorderResult: POST .../reorder

Link Schemas:
    - LinkCreate: POST /links
    - LinkBatchCreate / LinkImportRequest: batch insert and text import
    - LinkUpdate: PATCH /links/{id}
    - LinkResponse / LinkBatchResponse

Catalog Schemas:
    - CatalogQuery: normalized public catalog query
    - CatalogItem / CatalogLink / CatalogResponse: public projection
"""

from linkshelf.schemas.link import (
    LinkDraft,
    LinkCreate,
    LinkBatchCreate,
    LinkImportRequest,
    LinkUpdate,
    LinkResponse,
    LinkBatchResponse,
)

from linkshelf.schemas.collection import (
    CollectionBase,
    CollectionCreate,
    CollectionUpdate,
    CollectionResponse,
    CollectionDetailResponse,
    CollectionListResponse,
    ReorderRequest,
    ReorderResult,
)

from linkshelf.schemas.catalog import (
    CatalogQuery,
    CatalogLink,
    CatalogItem,
    CatalogResponse,
)

__all__ = [
    # Link schemas
    "LinkDraft",
    "LinkCreate",
    "LinkBatchCreate",
    "LinkImportRequest",
    "LinkUpdate",
    "LinkResponse",
    "LinkBatchResponse",
    # Collection schemas
    "CollectionBase",
    "CollectionCreate",
    "CollectionUpdate",
    "CollectionResponse",
    "CollectionDetailResponse",
    "CollectionListResponse",
    "ReorderRequest",
    "ReorderResult",
    # Catalog schemas
    "CatalogQuery",
    "CatalogLink",
    "CatalogItem",
    "CatalogResponse",
]
