"""FastAPI dependencies wiring stores, services and the current user."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from postapi.api.errors import failure_boundary
from postapi.config import get_settings
from postapi.database import get_db
from postapi.models.user import User
from postapi.services.auth import AuthService
from postapi.services.posts import PostService
from postapi.services.security import PasswordHasher, TokenManager
from postapi.stores.posts import SqlPostStore
from postapi.stores.users import SqlUserStore

# auto_error=False so a missing header reaches get_current_user and becomes a 401
security = HTTPBearer(auto_error=False)


def get_token_manager(
    db: Annotated[Session, Depends(get_db)],
) -> TokenManager:
    """Get token manager bound to the request session."""
    return TokenManager(db, get_settings())


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
    tokens: Annotated[TokenManager, Depends(get_token_manager)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(SqlUserStore(db), PasswordHasher(), tokens)


def get_post_service(
    db: Annotated[Session, Depends(get_db)],
) -> PostService:
    """Get post service with dependencies."""
    return PostService(SqlPostStore(db))


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> User:
    """Get the current authenticated user from the bearer token."""
    token = credentials.credentials if credentials else None
    with failure_boundary("Authentication failed"):
        return auth_service.current_user(token)
