"""
Login and identity listing.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Union

from shared.logging import get_logger
from shared.store import RecordStore

from ..tokens.claims import TokenClaims
from ..tokens.issuer import TokenIssuer
from .models import IdentityRecord, IdentityView
from .verifier import AuthenticationFailure, CredentialVerifier


@dataclass(frozen=True)
class LoginResult:
    """Successful login."""
    token: str
    username: str
    expires_at: datetime


class AuthenticationService:
    """Verifies credentials, mints tokens and lists identities."""

    def __init__(self, identities: RecordStore[IdentityRecord],
                 verifier: CredentialVerifier, issuer: TokenIssuer):
        self.identities = identities
        self.verifier = verifier
        self.issuer = issuer
        self.logger = get_logger("auth.login")

    def login(self, username: str, secret: str) -> Union[LoginResult, AuthenticationFailure]:
        outcome = self.verifier.verify(username, secret)
        if isinstance(outcome, AuthenticationFailure):
            return outcome

        issued = self.issuer.issue(outcome.id, outcome.username, outcome.role)
        return LoginResult(
            token=issued.token,
            username=outcome.username,
            expires_at=issued.expires_at
        )

    def list_identities(self, claims: TokenClaims) -> List[IdentityView]:
        """All identities without secrets. ``claims`` proves the caller is authenticated."""
        self.logger.info("Listing identities", requested_by=claims.username)
        return [IdentityView.from_record(record) for record in self.identities.list_all()]
