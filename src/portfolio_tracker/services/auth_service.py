"""Authentication service: accounts, password hashing and bearer tokens."""

import logging
import uuid
from datetime import datetime, timedelta
from typing import Callable

from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTError
from passlib.context import CryptContext

from portfolio_tracker.core.exceptions import (
    AuthenticationError,
    TokenExpiredError,
    ValidationError,
)
from portfolio_tracker.core.timezone import now_utc
from portfolio_tracker.domain.models import User, UserIdentity
from portfolio_tracker.repositories.protocols import UserRepository

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(plain: str) -> str:
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


class AuthService:
    """
    Service for user registration, login and token lifecycle.

    Tokens are HS256 JWTs carrying id, email, name, iat and exp claims.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        secret: str,
        algorithm: str = "HS256",
        token_ttl_minutes: int = 60,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._user_repo = user_repo
        self._secret = secret
        self._algorithm = algorithm
        self._token_ttl = timedelta(minutes=token_ttl_minutes)
        self._clock = clock

    def signup(self, name: str, email: str, password: str) -> str:
        """
        Create a user and return a token for it.

        Raises ValidationError if the email is already registered.
        """
        name = name.strip()
        email = email.strip().lower()
        if not name:
            raise ValidationError("Name is required")
        if self._user_repo.get_by_email(email):
            raise ValidationError("User with this email already exists")

        user = self._user_repo.create(
            User(
                user_id=str(uuid.uuid4()),
                name=name,
                email=email,
                password_hash=hash_password(password),
                created_at=self._clock(),
            )
        )
        logger.info("Registered user %s", user.user_id)
        return self.issue_token(user)

    def login(self, email: str, password: str) -> str:
        """Verify credentials and return a token."""
        user = self._user_repo.get_by_email(email.strip().lower())
        if user is None or not verify_password(password, user.password_hash):
            raise AuthenticationError("Invalid email or password")
        return self.issue_token(user)

    def refresh(self, token: str) -> str:
        """Issue a fresh token for the holder of a still-valid token."""
        identity = self.verify_token(token)
        user = self._user_repo.get_by_id(identity.id)
        if user is None:
            raise AuthenticationError("User no longer exists")
        return self.issue_token(user)

    def issue_token(self, user: User) -> str:
        """Sign a token for user, expiring after the configured TTL."""
        issued_at = self._clock()
        claims = {
            "id": user.user_id,
            "email": user.email,
            "name": user.name,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._token_ttl).timestamp()),
        }
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def verify_token(self, token: str) -> UserIdentity:
        """
        Check signature and expiry, returning the identity in the claims.

        Raises TokenExpiredError for an expired token and
        AuthenticationError for anything else wrong with it.
        """
        try:
            claims = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except ExpiredSignatureError as e:
            raise TokenExpiredError("Token has expired") from e
        except JWTError as e:
            raise AuthenticationError("Invalid token") from e

        if not claims.get("id"):
            raise AuthenticationError("Invalid token")
        return UserIdentity(
            id=str(claims["id"]),
            email=claims.get("email", ""),
            name=claims.get("name", ""),
        )
