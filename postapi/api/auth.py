"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from postapi.api.dependencies import get_auth_service, get_current_user
from postapi.api.errors import failure_boundary
from postapi.exceptions import AuthenticationError, ValidationError
from postapi.models.user import User
from postapi.schemas.auth import (
    AuthResponse,
    CurrentUserResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from postapi.schemas.post import MessageResponse
from postapi.services.auth import AuthService

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user and return its first token."""
    with failure_boundary("Registration failed"):
        token, user = auth_service.register(user_data.email, user_data.password, user_data.name)

    return AuthResponse(
        token=token,
        message="User registered successfully",
        data=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Login with email and password."""
    with failure_boundary("Login failed"):
        try:
            token, user = auth_service.login(credentials.email, credentials.password)
        except AuthenticationError as e:
            # Reported against the email field so the response does not say which part was wrong
            raise ValidationError.for_field("email", e.message) from e

    return AuthResponse(
        token=token,
        message="Logged in successfully",
        data=UserResponse.model_validate(user),
    )


@router.post("/logout", response_model=MessageResponse)
def logout(
    current_user: Annotated[User, Depends(get_current_user)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Revoke every token of the current user."""
    with failure_boundary("Logout failed"):
        auth_service.logout(current_user)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=CurrentUserResponse)
def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return {"data": current_user}
