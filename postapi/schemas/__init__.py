"""Pydantic schemas for API requests and responses."""

from postapi.schemas.auth import (
    AuthResponse,
    CurrentUserResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from postapi.schemas.post import (
    MessageResponse,
    PostCreate,
    PostCreatedEnvelope,
    PostEnvelope,
    PostListEnvelope,
    PostResponse,
    PostUpdate,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    "CurrentUserResponse",
    "PostCreate",
    "PostUpdate",
    "PostResponse",
    "PostEnvelope",
    "PostCreatedEnvelope",
    "PostListEnvelope",
    "MessageResponse",
]
