"""
Pydantic Schemas for Link endpoints
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime

from linkshelf.config import settings
from linkshelf.utils.url import is_safe_url


def _check_url(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if not is_safe_url(value):
        raise ValueError("Only http and https URLs are allowed")
    return value


class LinkDraft(BaseModel):
    """A link to insert; collection and order are assigned by the server"""
    url: str = Field(..., max_length=2048, description="http or https URL")
    name: str = Field(..., min_length=1, max_length=200, description="Display name")
    comment: Optional[str] = Field(None, max_length=1000)

    @field_validator("url")
    @classmethod
    def validate_url(cls, v):
        return _check_url(v)


class LinkCreate(LinkDraft):
    """Schema for creating a single link"""
    collection_id: str = Field(..., min_length=1)


class LinkBatchCreate(BaseModel):
    """Schema for inserting several links at the tail of a collection"""
    links: List[LinkDraft] = Field(..., min_length=1)

    @field_validator("links")
    @classmethod
    def validate_batch_size(cls, v):
        if len(v) > settings.LINK_BATCH_MAX_SIZE:
            raise ValueError(f"At most {settings.LINK_BATCH_MAX_SIZE} links per batch")
        return v


class LinkImportRequest(BaseModel):
    """Raw pasted text, one URL per line"""
    text: str = Field(..., min_length=1)


class LinkUpdate(BaseModel):
    """Schema for updating a link (all fields optional)"""
    url: Optional[str] = Field(None, max_length=2048)
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    comment: Optional[str] = Field(None, max_length=1000)

    @field_validator("url")
    @classmethod
    def validate_url(cls, v):
        return _check_url(v)


class LinkResponse(BaseModel):
    """Schema for link responses"""
    id: str
    collection_id: str
    url: str
    name: str
    comment: Optional[str]
    order: int
    created_at: Optional[datetime]
    updated_at: datetime

    class Config:
        from_attributes = True


class LinkBatchResponse(BaseModel):
    """Result of a batch insert or text import"""
    count: int
    links: List[LinkResponse]
