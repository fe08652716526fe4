"""
Token validation service for Auth service.
"""

import json
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from jose import jws
from jose.exceptions import JWSError
from jose.utils import base64url_decode, base64url_encode

from shared.clock import Clock, utc_now
from shared.config import ServiceConfig
from shared.logging import get_logger

from ..tokens.claims import (
    ALGORITHM,
    CLAIM_AUDIENCE,
    CLAIM_EXPIRES_AT,
    CLAIM_ISSUED_AT,
    CLAIM_ISSUER,
    CLAIM_ROLE,
    CLAIM_SUBJECT,
    CLAIM_TOKEN_ID,
    CLAIM_UNIQUE_NAME,
    TokenClaims,
)


_BASE64URL = re.compile(r"[A-Za-z0-9_-]*")
_DIGITS = re.compile(r"[0-9]+")


class TokenFailureReason(str, Enum):
    """Why a token was rejected. For diagnostics only, never sent to clients."""
    MALFORMED = "malformed"
    INVALID_SIGNATURE = "invalid_signature"
    INVALID_ISSUER = "invalid_issuer"
    INVALID_AUDIENCE = "invalid_audience"
    EXPIRED = "expired"


@dataclass(frozen=True)
class TokenValidationResult:
    """Outcome of validating a token."""
    valid: bool
    claims: Optional[TokenClaims] = None
    reason: Optional[TokenFailureReason] = None

    @classmethod
    def success(cls, claims: TokenClaims) -> "TokenValidationResult":
        return cls(valid=True, claims=claims)

    @classmethod
    def failure(cls, reason: TokenFailureReason) -> "TokenValidationResult":
        return cls(valid=False, reason=reason)


class _Rejected(Exception):
    def __init__(self, reason: TokenFailureReason):
        self.reason = reason
        super().__init__(reason.value)


class TokenValidator:
    """Validates tokens minted by ``TokenIssuer``.

    Checks run in a fixed order and stop at the first failure: structure,
    signature, issuer, audience, expiry. Expiry has no clock-skew allowance;
    a token is expired from the second named in its ``exp`` claim.
    """

    def __init__(self, secret: str, issuer: str, audience: str, clock: Clock = utc_now):
        self.secret = secret
        self.issuer = issuer
        self.audience = audience
        self.clock = clock
        self.logger = get_logger("auth.validator")

    @classmethod
    def from_config(cls, config: ServiceConfig, clock: Clock = utc_now) -> "TokenValidator":
        return cls(
            secret=config.require_signing_secret(),
            issuer=config.jwt_issuer,
            audience=config.jwt_audience,
            clock=clock
        )

    def validate(self, token: str) -> TokenValidationResult:
        """Validate a token and extract its identity claims."""
        # Remove Bearer prefix if present
        if token.startswith("Bearer "):
            token = token[7:]

        try:
            payload, signature = self._decode_structure(token)
            self._verify_signature(token, signature)
            self._verify_issuer(payload)
            self._verify_audience(payload)
            self._verify_expiry(payload)
            claims = self._extract_claims(payload)
        except _Rejected as rejected:
            self.logger.warning("Token rejected", reason=rejected.reason.value)
            return TokenValidationResult.failure(rejected.reason)

        return TokenValidationResult.success(claims)

    def _decode_structure(self, token: str) -> Tuple[Dict[str, Any], str]:
        # Anything after the second dot belongs to the signature segment.
        segments = token.split(".", 2)
        if len(segments) != 3:
            raise _Rejected(TokenFailureReason.MALFORMED)

        header = _decode_json_segment(segments[0])
        payload = _decode_json_segment(segments[1])
        if not isinstance(header, dict) or not isinstance(payload, dict):
            raise _Rejected(TokenFailureReason.MALFORMED)
        return payload, segments[2]

    def _verify_signature(self, token: str, signature: str) -> None:
        # A non-canonical encoding could decode to the genuine MAC.
        if not _is_canonical_segment(signature):
            raise _Rejected(TokenFailureReason.INVALID_SIGNATURE)

        # Only HS256 is accepted, so "none" and asymmetric algorithms fail here.
        try:
            jws.verify(token, self.secret, algorithms=[ALGORITHM])
        except JWSError:
            raise _Rejected(TokenFailureReason.INVALID_SIGNATURE)

    def _verify_issuer(self, payload: Dict[str, Any]) -> None:
        if payload.get(CLAIM_ISSUER) != self.issuer:
            raise _Rejected(TokenFailureReason.INVALID_ISSUER)

    def _verify_audience(self, payload: Dict[str, Any]) -> None:
        audience = payload.get(CLAIM_AUDIENCE)
        if isinstance(audience, list):
            accepted = self.audience in audience
        else:
            accepted = audience == self.audience
        if not accepted:
            raise _Rejected(TokenFailureReason.INVALID_AUDIENCE)

    def _verify_expiry(self, payload: Dict[str, Any]) -> None:
        expires_at = payload.get(CLAIM_EXPIRES_AT)
        if not _is_number(expires_at):
            raise _Rejected(TokenFailureReason.MALFORMED)
        if self.clock().timestamp() >= expires_at:
            raise _Rejected(TokenFailureReason.EXPIRED)

    def _extract_claims(self, payload: Dict[str, Any]) -> TokenClaims:
        subject = payload.get(CLAIM_SUBJECT)
        username = payload.get(CLAIM_UNIQUE_NAME)
        role = payload.get(CLAIM_ROLE)
        issued_at = payload.get(CLAIM_ISSUED_AT)

        if not isinstance(subject, str) or not _DIGITS.fullmatch(subject):
            raise _Rejected(TokenFailureReason.MALFORMED)
        if not isinstance(username, str) or not isinstance(role, str):
            raise _Rejected(TokenFailureReason.MALFORMED)
        if not _is_number(issued_at):
            raise _Rejected(TokenFailureReason.MALFORMED)

        try:
            issued = datetime.fromtimestamp(issued_at, tz=timezone.utc)
            expires = datetime.fromtimestamp(payload[CLAIM_EXPIRES_AT], tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            raise _Rejected(TokenFailureReason.MALFORMED)

        audience = payload[CLAIM_AUDIENCE]
        return TokenClaims(
            subject=int(subject),
            username=username,
            role=role,
            token_id=str(payload.get(CLAIM_TOKEN_ID, "")),
            issued_at=issued,
            expires_at=expires,
            issuer=payload[CLAIM_ISSUER],
            audience=self.audience if isinstance(audience, list) else audience
        )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _decode_json_segment(segment: str) -> Any:
    if not segment or not _BASE64URL.fullmatch(segment):
        raise _Rejected(TokenFailureReason.MALFORMED)
    try:
        return json.loads(base64url_decode(segment.encode("ascii")))
    except ValueError:
        raise _Rejected(TokenFailureReason.MALFORMED)


def _is_canonical_segment(segment: str) -> bool:
    """True when ``segment`` is exactly the unpadded base64url text of its bytes."""
    if not _BASE64URL.fullmatch(segment):
        return False
    raw = segment.encode("ascii")
    try:
        return base64url_encode(base64url_decode(raw)) == raw
    except ValueError:
        return False
