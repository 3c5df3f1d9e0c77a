"""
Client session store.

Owns the authenticated identity and its bearer token, mirrors them to
durable client storage, and notifies subscribers whenever the identity
(user id) changes.
"""

import json
import logging
from datetime import datetime
from typing import Callable, Optional

from portfolio_tracker.core.exceptions import AuthenticationError, NetworkOrServerError
from portfolio_tracker.core.timezone import now_utc
from portfolio_tracker.core.tokens import Err, decode_claims, is_token_valid
from portfolio_tracker.domain.models import Session, UserIdentity
from portfolio_tracker.providers.portfolio_api import ApiResponse, PortfolioApi
from portfolio_tracker.repositories.protocols import ClientStorage

logger = logging.getLogger(__name__)

# Durable storage keys
TOKEN_KEY = "token"
USER_KEY = "user"
PORTFOLIO_KEY = "portfolioAssets"

IdentityListener = Callable[[Optional[str], Optional[str]], None]


class SessionStore:
    """
    Holds at most one Session at a time.

    Persisted state is read only by restore(); afterwards the in-memory
    session is authoritative and storage is a mirror of it.
    """

    def __init__(
        self,
        api: PortfolioApi,
        storage: ClientStorage,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._api = api
        self._storage = storage
        self._clock = clock
        self._session: Optional[Session] = None
        self._initialized = False
        self._error: Optional[str] = None
        self._listeners: list[IdentityListener] = []

    # State accessors

    @property
    def session(self) -> Optional[Session]:
        return self._session

    @property
    def current_user(self) -> Optional[UserIdentity]:
        return self._session.user if self._session else None

    @property
    def user_id(self) -> Optional[str]:
        return self._session.user_id if self._session else None

    @property
    def token(self) -> Optional[str]:
        return self._session.access_token if self._session else None

    @property
    def initialized(self) -> bool:
        """False until restore() has determined the startup session."""
        return self._initialized

    @property
    def error(self) -> Optional[str]:
        """Message of the last authentication failure, for display."""
        return self._error

    def subscribe(self, listener: IdentityListener) -> Callable[[], None]:
        """
        Register a listener called with (previous_user_id, current_user_id).

        Returns a callable that unregisters the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Session operations

    def restore(self) -> Optional[UserIdentity]:
        """Load the persisted session, discarding it if the token is unusable."""
        try:
            token = self._storage.get_item(TOKEN_KEY)
            if not token:
                if self._storage.get_item(USER_KEY) is not None:
                    self._storage.remove_item(USER_KEY)
                self._set_session(None)
                return None

            if not is_token_valid(token, self._clock()):
                logger.info("Stored session expired, clearing credentials")
                self._purge_persisted()
                self._set_session(None)
                return None

            session = self._session_from_token(token)
            self._set_session(session)
            logger.info("Restored session for user %s", session.user_id if session else None)
            return self.current_user
        finally:
            self._initialized = True

    def login(self, email: str, password: str) -> UserIdentity:
        """Authenticate with email and password."""
        return self._authenticate(
            lambda: self._api.login(email, password),
            fallback_message="Failed to login",
        )

    def signup(self, name: str, email: str, password: str) -> UserIdentity:
        """Register a new account and sign in as it."""
        return self._authenticate(
            lambda: self._api.signup(name, email, password),
            fallback_message="Failed to signup",
        )

    def logout(self) -> None:
        """Drop the session and every user-specific persisted key."""
        previous = self.user_id
        self._purge_persisted()
        self._error = None
        self._set_session(None)
        if previous is not None:
            logger.info("User %s logged out", previous)

    def is_authenticated(self) -> bool:
        """Re-evaluated on every call since expiry depends on the clock."""
        token = self.token
        return bool(token) and is_token_valid(token, self._clock())

    def valid_token(self) -> Optional[str]:
        """The bearer token if the session is currently valid, else None."""
        return self.token if self.is_authenticated() else None

    def refresh_token(self) -> bool:
        """
        Exchange the current token for a fresh one.

        Single attempt. Returns False, leaving the session untouched, on any
        failure.
        """
        token = self.token
        if not token:
            return False

        try:
            response = self._api.refresh(token)
        except NetworkOrServerError as e:
            logger.warning("Token refresh failed: %s", e.message)
            return False

        if not response.ok or response.token is None:
            logger.warning(
                "Token refresh rejected (%s): %s",
                response.status_code,
                response.message or "no token in response",
            )
            return False

        session = self._session_from_token(response.token)
        if session is None:
            logger.warning("Token refresh returned an undecodable token")
            return False

        self._persist(session)
        self._set_session(session)
        return True

    # Helpers

    def _authenticate(
        self,
        request: Callable[[], ApiResponse],
        fallback_message: str,
    ) -> UserIdentity:
        # Cached holdings are dropped before any credential exchange
        self._storage.remove_item(PORTFOLIO_KEY)

        try:
            response = request()
        except NetworkOrServerError as e:
            self._error = e.message
            raise

        if not response.ok:
            raise self._auth_failure(response.message or fallback_message)

        token = response.token
        if token is None:
            raise self._auth_failure("Token not received")

        session = self._session_from_token(token)
        if session is None:
            raise self._auth_failure("Received an invalid token")

        self._persist(session)
        self._error = None
        self._set_session(session)
        logger.info("User %s signed in", session.user_id)
        return session.user

    def _auth_failure(self, message: str) -> AuthenticationError:
        self._error = message
        logger.warning("Authentication failed: %s", message)
        return AuthenticationError(message)

    def _session_from_token(self, token: str) -> Optional[Session]:
        result = decode_claims(token)
        if isinstance(result, Err):
            logger.debug("Token rejected: %s", result.error.reason)
            return None
        claims = result.value
        return Session(
            user=UserIdentity(id=claims.user_id, email=claims.email, name=claims.name),
            access_token=token,
            expires_at=claims.expires_at,
        )

    def _persist(self, session: Session) -> None:
        self._storage.set_item(TOKEN_KEY, session.access_token)
        self._storage.set_item(USER_KEY, json.dumps(session.user.to_dict()))

    def _purge_persisted(self) -> None:
        for key in (TOKEN_KEY, USER_KEY, PORTFOLIO_KEY):
            self._storage.remove_item(key)

    def _set_session(self, session: Optional[Session]) -> None:
        previous = self.user_id
        self._session = session
        current = self.user_id
        if previous != current:
            for listener in list(self._listeners):
                listener(previous, current)
