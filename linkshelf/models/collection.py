"""
Collection Model - Named, ordered, user-owned set of links
"""

from sqlalchemy import Column, String, Boolean, Integer, ForeignKey, DateTime, Index
from sqlalchemy.orm import relationship
import uuid

from linkshelf.database import Base, utcnow


class Collection(Base):
    """
    Collection model - a user's named list of links

    Attributes:
        id: Opaque collection identifier
        user_id: Owner (foreign key to users table)
        name: Collection name (1-100 chars)
        description: Optional description (max 500 chars)
        is_public: Whether the collection is listed in the public catalog
        order: Position within the owner's collection list
        created_at: Collection creation timestamp
        updated_at: Advances on any change to the collection or one of its links

    Relationships:
        user: Owner of this collection (many-to-one)
        links: Links in this collection, ascending by order (cascade delete)
    """

    __tablename__ = "collections"
    __table_args__ = (
        Index("ix_collections_user_order", "user_id", "order"),
        Index("ix_collections_public_updated", "is_public", "updated_at"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    name = Column(String(100), nullable=False)
    description = Column(String(500))
    is_public = Column(Boolean, nullable=False, default=False)
    order = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    user = relationship("User", back_populates="collections")
    links = relationship(
        "Link",
        back_populates="collection",
        cascade="all, delete-orphan",
        order_by="Link.order",
    )

    def __repr__(self):
        return f"<Collection(id={self.id}, name={self.name}, user_id={self.user_id})>"
