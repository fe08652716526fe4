"""
Token issuance for verified identities.
"""

import uuid
from datetime import datetime, timedelta, timezone

from jose import jwt

from shared.clock import Clock, utc_now
from shared.config import ServiceConfig
from shared.logging import get_logger

from .claims import (
    ALGORITHM,
    CLAIM_AUDIENCE,
    CLAIM_EXPIRES_AT,
    CLAIM_ISSUED_AT,
    CLAIM_ISSUER,
    CLAIM_ROLE,
    CLAIM_SUBJECT,
    CLAIM_TOKEN_ID,
    CLAIM_UNIQUE_NAME,
    IssuedToken,
)


class TokenIssuer:
    """Mints HS256 JWTs carrying identity claims.

    Holds no mutable state; the output depends only on the arguments, the
    configured secret and the clock.
    """

    def __init__(self, secret: str, issuer: str, audience: str,
                 lifetime_minutes: int = 60, clock: Clock = utc_now):
        self.secret = secret
        self.issuer = issuer
        self.audience = audience
        self.lifetime = timedelta(minutes=lifetime_minutes)
        self.clock = clock
        self.logger = get_logger("auth.issuer")

    @classmethod
    def from_config(cls, config: ServiceConfig, clock: Clock = utc_now) -> "TokenIssuer":
        return cls(
            secret=config.require_signing_secret(),
            issuer=config.jwt_issuer,
            audience=config.jwt_audience,
            lifetime_minutes=config.jwt_expiration_minutes,
            clock=clock
        )

    def issue(self, identity_id: int, username: str, role: str) -> IssuedToken:
        """Create a signed token for an identity."""
        # JWT timestamps are whole seconds; truncate so expires_at matches exp.
        issued_at = int(self.clock().timestamp())
        expires_at = issued_at + int(self.lifetime.total_seconds())

        claims = {
            CLAIM_SUBJECT: str(identity_id),
            CLAIM_UNIQUE_NAME: username,
            CLAIM_ROLE: role,
            CLAIM_TOKEN_ID: str(uuid.uuid4()),
            CLAIM_ISSUED_AT: issued_at,
            CLAIM_EXPIRES_AT: expires_at,
            CLAIM_ISSUER: self.issuer,
            CLAIM_AUDIENCE: self.audience,
        }

        token = jwt.encode(claims, self.secret, algorithm=ALGORITHM)

        self.logger.info(
            "Token issued",
            sub=claims[CLAIM_SUBJECT],
            jti=claims[CLAIM_TOKEN_ID],
            exp=expires_at
        )

        return IssuedToken(
            token=token,
            expires_at=datetime.fromtimestamp(expires_at, tz=timezone.utc)
        )
