"""Post model."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from postapi.database import Base
from postapi.models.mixins import TimestampMixin


class Post(Base, TimestampMixin):
    """A post. Any authenticated user may edit or delete it."""

    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)

    # Relationships
    author = relationship("User", back_populates="posts")
