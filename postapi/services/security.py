"""Password hashing and revocable bearer tokens."""

import hashlib
import logging
import secrets
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from postapi.config import Settings, get_settings
from postapi.models.access_token import AccessToken
from postapi.models.user import User

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class PasswordHasher:
    """One-way password hashing."""

    def __init__(self, context: CryptContext = pwd_context):
        self.context = context

    def hash(self, password: str) -> str:
        """Hash a password."""
        return self.context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        return self.context.verify(plain_password, hashed_password)


def hash_token_id(token_id: str) -> str:
    """Digest stored at rest for a token's secret id."""
    return hashlib.sha256(token_id.encode("utf-8")).hexdigest()


class TokenManager:
    """Issues, resolves and bulk-revokes bearer tokens.

    A token is a signed JWT whose ``jti`` claim is a random secret. The
    token is live only while an ``access_tokens`` row holding the digest of
    that secret exists, so revocation is a row delete.
    """

    def __init__(self, db: Session, settings: Settings | None = None):
        self.db = db
        self.settings = settings or get_settings()

    def issue(self, user: User) -> str:
        """Create a token for ``user`` and return its plaintext form.

        The plaintext is only available here; it cannot be recovered later.
        """
        token_id = secrets.token_urlsafe(32)
        record = AccessToken(
            user_id=user.id,
            name=self.settings.token_name,
            token_hash=hash_token_id(token_id),
        )
        self.db.add(record)
        self.db.commit()

        expire = datetime.now(UTC) + timedelta(minutes=self.settings.jwt_expiration_minutes)
        to_encode = {
            "sub": str(user.id),
            "jti": token_id,
            "exp": expire,
        }
        return jwt.encode(
            to_encode, self.settings.jwt_secret, algorithm=self.settings.jwt_algorithm
        )

    def resolve(self, token: str) -> User | None:
        """Return the owner of a live token, or None."""
        try:
            payload = jwt.decode(
                token, self.settings.jwt_secret, algorithms=[self.settings.jwt_algorithm]
            )
        except JWTError:
            return None

        token_id = payload.get("jti")
        subject = payload.get("sub")
        if not isinstance(token_id, str) or not token_id or subject is None:
            return None
        try:
            user_id = int(subject)
        except (TypeError, ValueError):
            return None

        record = (
            self.db.query(AccessToken)
            .filter(
                AccessToken.token_hash == hash_token_id(token_id),
                AccessToken.user_id == user_id,
            )
            .first()
        )
        if record is None:
            return None

        user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            logger.debug(f"Token {record.id} belongs to missing user {user_id}")
            return None

        record.last_used_at = datetime.now(UTC)
        self.db.commit()
        return user

    def revoke_all(self, user: User) -> int:
        """Delete every token owned by ``user``. Returns how many were removed."""
        revoked = (
            self.db.query(AccessToken)
            .filter(AccessToken.user_id == user.id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return revoked
