"""User model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from postapi.database import Base
from postapi.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and post authorship."""

    __tablename__ = "users"
    # Ids are never reused, so orphaned token rows cannot match a later user
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)

    # Relationships
    posts = relationship("Post", back_populates="author")
