"""
Credential verification against the identity store.
"""

import hmac
from dataclasses import dataclass
from typing import Union

from shared.logging import get_logger
from shared.store import RecordStore

from .models import IdentityRecord


@dataclass(frozen=True)
class AuthenticationFailure:
    """Bad credentials.

    Unknown usernames and wrong secrets produce the same value.
    """
    reason: str = "invalid_credentials"


INVALID_CREDENTIALS = AuthenticationFailure()


class CredentialVerifier:
    """Checks a username/secret pair against stored identities."""

    def __init__(self, identities: RecordStore[IdentityRecord]):
        self.identities = identities
        self.logger = get_logger("auth.verifier")

    def verify(self, username: str, secret: str) -> Union[IdentityRecord, AuthenticationFailure]:
        """Return the matching identity, or ``INVALID_CREDENTIALS``."""
        wanted = username.casefold()
        record = self.identities.find(lambda identity: identity.username.casefold() == wanted)

        # Compare even when the user is unknown so both failures cost the same.
        stored_secret = record.secret if record is not None else ""
        matches = hmac.compare_digest(stored_secret.encode("utf-8"), secret.encode("utf-8"))

        if record is None or not matches:
            self.logger.debug("Credential check failed", username=username)
            return INVALID_CREDENTIALS

        return record
