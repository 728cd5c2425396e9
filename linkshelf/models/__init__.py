"""
SQLAlchemy Database Models

All models use an opaque string id (uuid4) as primary key.
Timestamps are set application-side so every backend sees the same values.

Models:
    - User: Ownership root and API key holder
    - APIKey: API authentication tokens
    - Collection: Named, ordered set of links, optionally public
    - Link: Single URL entry within a collection

Relationships:
    User 1:N APIKey
    User 1:N Collection
    Collection 1:N Link

Cascade Deletes:
    - Delete User → Delete all APIKeys, Collections, Links
    - Delete Collection → Delete all Links
"""

from linkshelf.models.user import User
from linkshelf.models.api_key import APIKey
from linkshelf.models.collection import Collection
from linkshelf.models.link import Link

__all__ = ["User", "APIKey", "Collection", "Link"]
