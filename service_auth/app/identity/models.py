"""
Identity data models for the Auth Service.
"""

from dataclasses import dataclass
from typing import Iterable, List

from pydantic import BaseModel, Field

from shared.errors import ConfigurationError
from shared.store import RecordStore


@dataclass
class IdentityRecord:
    """A user that can log in.

    Secrets are stored as given; there is no hashing.
    """
    id: int
    username: str
    secret: str
    role: str = "User"


SEED_IDENTITIES: List[IdentityRecord] = [
    IdentityRecord(id=1, username="admin", secret="admin123", role="Admin"),
    IdentityRecord(id=2, username="user1", secret="user123", role="User"),
    IdentityRecord(id=3, username="test", secret="test123", role="User"),
]


def build_identity_store(seed: Iterable[IdentityRecord] = SEED_IDENTITIES) -> RecordStore[IdentityRecord]:
    """Create the identity store, rejecting usernames that collide ignoring case."""
    seed = list(seed)
    seen = set()
    for record in seed:
        key = record.username.casefold()
        if key in seen:
            raise ConfigurationError(
                f"Duplicate username in identity seed: {record.username}",
                details={"username": record.username}
            )
        seen.add(key)

    return RecordStore("identities", seed)


class LoginRequest(BaseModel):
    """Request model for login."""
    username: str = Field(..., min_length=1, description="Username")
    password: str = Field(..., min_length=1, description="Password")


class IdentityView(BaseModel):
    """Public view of an identity. Never carries the secret."""
    id: int
    username: str
    role: str

    @classmethod
    def from_record(cls, record: IdentityRecord) -> "IdentityView":
        return cls(id=record.id, username=record.username, role=record.role)
