"""Authentication service: registration, login, logout and token lookup."""

import logging

from sqlalchemy.exc import IntegrityError

from postapi.exceptions import AuthenticationError, ValidationError
from postapi.models.user import User
from postapi.services.security import PasswordHasher, TokenManager
from postapi.stores.users import UserStore

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "The email has already been taken."


class AuthService:
    """Credential checks and token lifecycle for users."""

    def __init__(self, users: UserStore, passwords: PasswordHasher, tokens: TokenManager):
        self.users = users
        self.passwords = passwords
        self.tokens = tokens

    def register(self, email: str, password: str, name: str) -> tuple[str, User]:
        """Create a user and issue its first token.

        Raises ValidationError on the ``email`` field if the address is
        already registered, including when a concurrent registration wins
        the unique constraint.
        """
        if self.users.find_by_email(email) is not None:
            raise ValidationError.for_field("email", EMAIL_TAKEN)

        try:
            user = self.users.create(
                {"email": email, "password_hash": self.passwords.hash(password), "name": name}
            )
        except IntegrityError as e:
            raise ValidationError.for_field("email", EMAIL_TAKEN) from e

        token = self.tokens.issue(user)
        logger.info(f"Registered user {user.id}")
        return token, user

    def login(self, email: str, password: str) -> tuple[str, User]:
        """Check credentials and issue a new token.

        Earlier tokens stay valid. Unknown email and wrong password fail the
        same way.
        """
        user = self.users.find_by_email(email)
        if user is None or not self.passwords.verify(password, user.password_hash):
            raise AuthenticationError("These credentials do not match our records.")

        token = self.tokens.issue(user)
        logger.info(f"User {user.id} logged in")
        return token, user

    def logout(self, current_user: User) -> int:
        """Revoke every token of ``current_user``."""
        revoked = self.tokens.revoke_all(current_user)
        logger.info(f"User {current_user.id} logged out, {revoked} token(s) revoked")
        return revoked

    def current_user(self, token: str | None) -> User:
        """Resolve a presented bearer token to its owner."""
        if not token:
            raise AuthenticationError()
        user = self.tokens.resolve(token)
        if user is None:
            raise AuthenticationError()
        return user
