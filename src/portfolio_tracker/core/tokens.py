"""
Bearer token claims parsing.

The client never verifies token signatures (it does not hold the secret);
it only reads the claims to learn the user identity and the expiry. Parsing
returns a result value instead of raising so that a malformed token is just
an invalid one.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Generic, Optional, TypeVar, Union

from jose import jwt
from jose.exceptions import JOSEError

from portfolio_tracker.core.timezone import from_epoch_seconds, now_utc, to_epoch_millis

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful parse result."""

    value: T


@dataclass(frozen=True)
class DecodeFailure:
    """Why a token could not be decoded."""

    reason: str


@dataclass(frozen=True)
class Err:
    """Failed parse result."""

    error: DecodeFailure


@dataclass(frozen=True)
class TokenClaims:
    """Claims the client relies on."""

    user_id: str
    email: str
    name: str
    exp: int
    expires_at: datetime


ClaimsResult = Union[Ok[TokenClaims], Err]


def decode_claims(token: Optional[str]) -> ClaimsResult:
    """Decode the unverified claims of a JWT into TokenClaims."""
    if not token or not isinstance(token, str):
        return Err(DecodeFailure("token is empty"))
    try:
        raw: dict[str, Any] = jwt.get_unverified_claims(token)
    except JOSEError as e:
        return Err(DecodeFailure(f"malformed token: {e}"))

    exp = raw.get("exp")
    user_id = raw.get("id")
    # bool is an int subclass; reject it explicitly
    if isinstance(exp, bool) or not isinstance(exp, (int, float)):
        return Err(DecodeFailure("missing or non-numeric exp claim"))
    try:
        if not math.isfinite(exp):
            raise ValueError("exp is not finite")
        expires_at = from_epoch_seconds(int(exp))
    except (OverflowError, ValueError, OSError):
        return Err(DecodeFailure("exp out of range"))
    if user_id is None or user_id == "":
        return Err(DecodeFailure("missing id claim"))

    return Ok(
        TokenClaims(
            user_id=str(user_id),
            email=str(raw.get("email") or ""),
            name=str(raw.get("name") or ""),
            exp=int(exp),
            expires_at=expires_at,
        )
    )


def is_token_valid(token: Optional[str], now: Optional[datetime] = None) -> bool:
    """True iff the token decodes and exp*1000 is after now in milliseconds."""
    result = decode_claims(token)
    if isinstance(result, Err):
        return False
    current = now or now_utc()
    return result.value.exp * 1000 > to_epoch_millis(current)
