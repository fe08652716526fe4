"""
Claim names and typed claim records for service tokens.
"""

from dataclasses import dataclass
from datetime import datetime

ALGORITHM = "HS256"

CLAIM_SUBJECT = "sub"
CLAIM_UNIQUE_NAME = "unique_name"
CLAIM_ROLE = "role"
CLAIM_TOKEN_ID = "jti"
CLAIM_ISSUED_AT = "iat"
CLAIM_EXPIRES_AT = "exp"
CLAIM_ISSUER = "iss"
CLAIM_AUDIENCE = "aud"


@dataclass(frozen=True)
class TokenClaims:
    """Identity claims carried by a validated token."""
    subject: int
    username: str
    role: str
    token_id: str
    issued_at: datetime
    expires_at: datetime
    issuer: str
    audience: str


@dataclass(frozen=True)
class IssuedToken:
    """A freshly minted token and the instant it stops being valid."""
    token: str
    expires_at: datetime
