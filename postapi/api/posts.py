"""Post API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from postapi.api.dependencies import get_current_user, get_post_service
from postapi.api.errors import failure_boundary
from postapi.models.user import User
from postapi.schemas.post import (
    MessageResponse,
    PostCreate,
    PostCreatedEnvelope,
    PostEnvelope,
    PostListEnvelope,
    PostUpdate,
)
from postapi.services.posts import PostService

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=PostListEnvelope)
def list_posts(
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """List all posts."""
    with failure_boundary("Failed to fetch posts"):
        posts = post_service.list_posts()
    return {"data": posts}


@router.post("", response_model=PostCreatedEnvelope, status_code=status.HTTP_201_CREATED)
def create_post(
    post_data: PostCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Create a new post authored by the current user."""
    with failure_boundary("Failed to create post"):
        post = post_service.create_post(post_data.model_dump(), current_user)
    return {"data": post, "message": "Post created successfully"}


@router.get("/{post_id}", response_model=PostEnvelope)
def get_post(
    post_id: int,
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Get a single post."""
    with failure_boundary("Failed to fetch post"):
        post = post_service.get_post(post_id)
    return {"data": post}


@router.api_route("/{post_id}", methods=["PUT", "PATCH"], response_model=MessageResponse)
def update_post(
    post_id: int,
    post_data: PostUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Update the supplied fields of a post."""
    with failure_boundary("Failed to update post"):
        post_service.update_post(post_id, post_data.model_dump(exclude_unset=True), current_user)
    return {"message": "Post updated successfully"}


@router.delete("/{post_id}", response_model=MessageResponse)
def delete_post(
    post_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Delete a post."""
    with failure_boundary("Failed to delete post"):
        post_service.delete_post(post_id, current_user)
    return {"message": "Post deleted successfully"}
