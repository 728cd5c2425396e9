"""
Pydantic Schemas for Collection endpoints
Request/Response validation
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

from linkshelf.schemas.link import LinkResponse


class CollectionBase(BaseModel):
    """Base schema with common fields"""
    name: str = Field(..., min_length=1, max_length=100, description="Collection name")
    description: Optional[str] = Field(None, max_length=500, description="Optional description")
    is_public: bool = Field(False, description="List this collection in the public catalog")


class CollectionCreate(CollectionBase):
    """Schema for creating a new collection"""
    pass


class CollectionUpdate(BaseModel):
    """Schema for updating a collection (all fields optional, null description clears it)"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    is_public: Optional[bool] = None


class CollectionResponse(CollectionBase):
    """Schema for collection responses"""
    id: str
    user_id: str
    order: int
    link_count: int = Field(default=0, description="Number of links in collection")
    created_at: Optional[datetime]
    updated_at: datetime

    class Config:
        from_attributes = True


class CollectionDetailResponse(CollectionResponse):
    """Collection with all of its links, ascending by order"""
    links: List[LinkResponse] = Field(default_factory=list)


class CollectionListResponse(BaseModel):
    """Schema for the owner's collection list"""
    data: List[CollectionResponse]
    total: int


class ReorderRequest(BaseModel):
    """Full or partial ordering to apply; position in the list becomes the new order"""
    ordered_ids: List[str] = Field(..., description="Entity ids in their new order")


class ReorderResult(BaseModel):
    """Rows affected by one scheduled order update (expected 1)"""
    count: int
