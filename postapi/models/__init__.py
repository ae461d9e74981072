"""SQLAlchemy models."""

from postapi.models.access_token import AccessToken
from postapi.models.post import Post
from postapi.models.user import User

__all__ = [
    "User",
    "AccessToken",
    "Post",
]
