"""Access token model."""

from sqlalchemy import Column, DateTime, Integer, String

from postapi.database import Base
from postapi.models.mixins import TimestampMixin


class AccessToken(Base, TimestampMixin):
    """A live bearer token. Deleting the row revokes the token.

    Only the SHA-256 digest of the token's secret id is stored. ``user_id``
    is deliberately not a foreign key: removing a user leaves its token rows
    behind. They stop resolving because the owner is gone and user ids are
    never reused.
    """

    __tablename__ = "access_tokens"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    token_hash = Column(String(64), unique=True, nullable=False, index=True)
    last_used_at = Column(DateTime(timezone=True), nullable=True)
