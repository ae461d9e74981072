"""User persistence."""

from abc import abstractmethod
from typing import Any, Protocol

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from postapi.models.user import User


class UserStore(Protocol):
    """Persistence and lookup of users."""

    @abstractmethod
    def get_all(self) -> list[User]: ...

    @abstractmethod
    def get_by_id(self, user_id: int) -> User | None: ...

    @abstractmethod
    def create(self, data: dict[str, Any]) -> User: ...

    @abstractmethod
    def update(self, user_id: int, data: dict[str, Any]) -> bool: ...

    @abstractmethod
    def delete(self, user_id: int) -> bool: ...

    @abstractmethod
    def find_by_email(self, email: str) -> User | None: ...


class SqlUserStore:
    """SQLAlchemy-backed user store."""

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> list[User]:
        return self.db.query(User).order_by(User.id).all()

    def get_by_id(self, user_id: int) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()

    def create(self, data: dict[str, Any]) -> User:
        """Insert a user. ``data`` must already carry ``password_hash``.

        Raises IntegrityError (after rolling back) if the email is taken.
        """
        user = User(**data)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user

    def update(self, user_id: int, data: dict[str, Any]) -> bool:
        user = self.get_by_id(user_id)
        if user is None:
            return False
        for field, value in data.items():
            setattr(user, field, value)
        self.db.commit()
        return True

    def delete(self, user_id: int) -> bool:
        # Tokens are left in place; they stop resolving once the owner is gone.
        user = self.get_by_id(user_id)
        if user is None:
            return False
        self.db.delete(user)
        self.db.commit()
        return True

    def find_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()
