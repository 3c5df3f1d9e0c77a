"""User domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional


@dataclass
class User:
    """Registered account as stored by the backend."""

    user_id: str
    name: str
    email: str
    password_hash: str
    created_at: Optional[datetime] = field(default=None)


@dataclass(frozen=True)
class UserIdentity:
    """The identity a client knows about: what the token claims carry."""

    id: str
    email: str
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "email": self.email, "name": self.name}
