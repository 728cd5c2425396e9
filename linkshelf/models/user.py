"""
User Model - Ownership root for collections and API keys
"""

from sqlalchemy import Column, String, Boolean, DateTime
from sqlalchemy.orm import relationship
import uuid

from linkshelf.database import Base, utcnow


class User(Base):
    """
    User model for API key ownership and collection ownership

    Attributes:
        id: Opaque user identifier (uuid4 string)
        email: User email (unique, indexed for fast lookup)
        name: Optional display name shown on the public profile
        is_active: Whether user can authenticate
        created_at: Account creation timestamp
        updated_at: Last modification timestamp

    Relationships:
        api_keys: User's API keys (one-to-many)
        collections: User's link collections (one-to-many)
    """

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(100))
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    # Relationships
    api_keys = relationship("APIKey", back_populates="user", cascade="all, delete-orphan")
    collections = relationship("Collection", back_populates="user", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email})>"
