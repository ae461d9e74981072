"""Post persistence."""

from abc import abstractmethod
from typing import Any, Protocol

from sqlalchemy.orm import Session

from postapi.models.post import Post


class PostStore(Protocol):
    """Persistence and lookup of posts."""

    @abstractmethod
    def get_all(self) -> list[Post]: ...

    @abstractmethod
    def get_by_id(self, post_id: int) -> Post | None: ...

    @abstractmethod
    def create(self, data: dict[str, Any]) -> Post: ...

    @abstractmethod
    def update(self, post_id: int, data: dict[str, Any]) -> bool: ...

    @abstractmethod
    def delete(self, post_id: int) -> bool: ...


class SqlPostStore:
    """SQLAlchemy-backed post store."""

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> list[Post]:
        return self.db.query(Post).order_by(Post.id).all()

    def get_by_id(self, post_id: int) -> Post | None:
        return self.db.query(Post).filter(Post.id == post_id).first()

    def create(self, data: dict[str, Any]) -> Post:
        post = Post(**data)
        self.db.add(post)
        self.db.commit()
        self.db.refresh(post)
        return post

    def update(self, post_id: int, data: dict[str, Any]) -> bool:
        """Apply only the supplied fields. Returns False for an unknown id."""
        post = self.get_by_id(post_id)
        if post is None:
            return False
        for field, value in data.items():
            setattr(post, field, value)
        self.db.commit()
        return True

    def delete(self, post_id: int) -> bool:
        """Delete by id. Returns False when no row was affected."""
        deleted = (
            self.db.query(Post)
            .filter(Post.id == post_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted > 0
