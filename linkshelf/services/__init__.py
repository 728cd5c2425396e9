"""
Business Logic Services

Includes:
- ordering: Next order index for collections and links
- ownership: Ownership checks and parent timestamp maintenance
- reorder_service: Generic, ownership-scoped reorder
- catalog_service: Public catalog search, sort and cursor pagination
- catalog_cache: Bounded TTL cache in front of the catalog
"""

# Lazy imports to avoid circular dependencies
# Import services directly from their modules instead

__all__ = [
    "ordering",
    "ownership",
    "reorder_service",
    "catalog_service",
    "catalog_cache",
]
