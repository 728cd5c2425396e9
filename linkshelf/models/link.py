"""
Link Model - A single URL entry inside a collection
"""

from sqlalchemy import Column, String, Text, Integer, ForeignKey, DateTime, Index
from sqlalchemy.orm import relationship
import uuid

from linkshelf.database import Base, utcnow


class Link(Base):
    """
    Link model - one URL with a display name and an optional comment

    Ownership is derived from the parent collection's owner.

    Attributes:
        id: Opaque link identifier
        collection_id: Parent collection (foreign key, cascade delete)
        url: http/https URL (validated at the API boundary)
        name: Display name (1-200 chars)
        comment: Optional comment (max 1000 chars)
        order: Position within the parent collection
        created_at: Link creation timestamp
        updated_at: Last modification timestamp
    """

    __tablename__ = "links"
    __table_args__ = (
        Index("ix_links_collection_order", "collection_id", "order"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    collection_id = Column(
        String(36), ForeignKey("collections.id", ondelete="CASCADE"), nullable=False, index=True
    )

    url = Column(String(2048), nullable=False)
    name = Column(String(200), nullable=False)
    comment = Column(Text)
    order = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    collection = relationship("Collection", back_populates="links")

    def __repr__(self):
        return f"<Link(id={self.id}, name={self.name}, collection_id={self.collection_id})>"
