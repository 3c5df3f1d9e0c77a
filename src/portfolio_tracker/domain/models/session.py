"""Client session model."""

from dataclasses import dataclass
from datetime import datetime

from portfolio_tracker.domain.models.user import UserIdentity


@dataclass(frozen=True)
class Session:
    """
    Locally held proof of authentication.

    Replaced wholesale on refresh, never patched field by field. Validity is
    judged from the token itself (see core.tokens.is_token_valid).
    """

    user: UserIdentity
    access_token: str
    expires_at: datetime

    @property
    def user_id(self) -> str:
        return self.user.id
