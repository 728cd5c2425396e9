"""
Pydantic Schemas for the public catalog

The catalog is a read-only projection of public collections.
Query bounds are clamped rather than rejected so boundary values
from clients never turn into hard failures.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Literal

from linkshelf.config import settings


class CatalogQuery(BaseModel):
    """Normalized catalog query (search, page size, cursor, link limit, sort)"""
    q: Optional[str] = Field(None, description="Case-insensitive search over name and description")
    limit: int = Field(default_factory=lambda: settings.PUBLIC_CATALOG_DEFAULT_LIMIT)
    cursor: Optional[str] = Field(None, description="Id of the last item of the previous page")
    link_limit: int = Field(default_factory=lambda: settings.PUBLIC_CATALOG_DEFAULT_LINK_LIMIT)
    sort_by: Literal["updated_at", "name"] = "updated_at"
    sort_order: Literal["asc", "desc"] = "desc"

    @field_validator("q", "cursor")
    @classmethod
    def blank_to_none(cls, v):
        if v is None:
            return None
        v = v.strip()
        return v or None

    @field_validator("limit")
    @classmethod
    def clamp_limit(cls, v):
        return min(max(v, 1), settings.PUBLIC_CATALOG_MAX_LIMIT)

    @field_validator("link_limit")
    @classmethod
    def clamp_link_limit(cls, v):
        return min(max(v, 1), settings.PUBLIC_CATALOG_MAX_LINK_LIMIT)


class CatalogLink(BaseModel):
    """Public projection of a link"""
    id: str
    name: str
    url: str
    comment: Optional[str]
    order: int


class CatalogItem(BaseModel):
    """Public projection of a collection with its first links"""
    id: str
    name: str
    description: Optional[str]
    is_public: Literal[True] = True
    updated_at: str = Field(..., description="ISO 8601 timestamp")
    top_links: List[CatalogLink] = Field(default_factory=list)


class CatalogResponse(BaseModel):
    """One page of the public catalog"""
    items: List[CatalogItem]
    next_cursor: Optional[str] = None
    total_count: int = 0
