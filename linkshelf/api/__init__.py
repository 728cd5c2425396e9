"""
API Routes and Endpoints

Routers:
    - auth: User registration and API keys
    - collections: Collection CRUD and reorder
    - links: Link CRUD, batch insert, text import and reorder
    - catalog: Public, cached, cursor-paginated catalog
    - users: Public user profiles
"""

from linkshelf.api import auth, collections, links, catalog, users

__all__ = ["auth", "collections", "links", "catalog", "users"]
