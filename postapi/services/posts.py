"""Post service."""

import logging
from typing import Any

from postapi.exceptions import NotFoundError
from postapi.models.post import Post
from postapi.models.user import User
from postapi.stores.posts import PostStore

logger = logging.getLogger(__name__)

POST_NOT_FOUND = "Post not found"


class PostService:
    """CRUD over posts.

    Reads are public. Writes take the acting user explicitly but do not
    restrict which posts that user may change.
    """

    def __init__(self, posts: PostStore):
        self.posts = posts

    def list_posts(self) -> list[Post]:
        return self.posts.get_all()

    def get_post(self, post_id: int) -> Post:
        post = self.posts.get_by_id(post_id)
        if post is None:
            raise NotFoundError(POST_NOT_FOUND)
        return post

    def create_post(self, data: dict[str, Any], author: User) -> Post:
        post = self.posts.create({**data, "user_id": author.id})
        logger.info(f"User {author.id} created post {post.id}")
        return post

    def update_post(self, post_id: int, data: dict[str, Any], actor: User) -> None:
        """Apply a partial update; fields absent from ``data`` are kept."""
        if not self.posts.update(post_id, data):
            raise NotFoundError(POST_NOT_FOUND)
        fields = ", ".join(sorted(data)) or "no fields"
        logger.info(f"User {actor.id} updated post {post_id} ({fields})")

    def delete_post(self, post_id: int, actor: User) -> None:
        if not self.posts.delete(post_id):
            raise NotFoundError(POST_NOT_FOUND)
        logger.info(f"User {actor.id} deleted post {post_id}")
