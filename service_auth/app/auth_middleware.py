"""
Authentication middleware for the Auth service.
"""

from fastapi import Request

from shared.errors import AuthenticationError
from shared.logging import get_logger, set_user_context
from shared.metrics import MetricsCollector

from .tokens.claims import TokenClaims
from .validation.token_validator import TokenValidator


class AuthMiddleware:
    """FastAPI dependency that requires a valid bearer token.

    Use as ``Depends(auth_middleware)``; the route receives the validated
    ``TokenClaims``. Every rejection raises the same ``AuthenticationError``
    so clients cannot tell why a token was refused.
    """

    def __init__(self, token_validator: TokenValidator, metrics: MetricsCollector):
        self.token_validator = token_validator
        self.metrics = metrics
        self.logger = get_logger("auth.auth_middleware")

    async def __call__(self, request: Request) -> TokenClaims:
        return self.authenticate_request(request)

    def authenticate_request(self, request: Request) -> TokenClaims:
        """Authenticate incoming request with a JWT bearer token."""
        auth_header = request.headers.get("Authorization")
        if not auth_header:
            self.metrics.increment_counter("token_validations_total", outcome="missing")
            raise AuthenticationError("Not authenticated")

        scheme, _, token = auth_header.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            self.metrics.increment_counter("token_validations_total", outcome="malformed_header")
            raise AuthenticationError("Not authenticated")

        result = self.token_validator.validate(token.strip())
        if not result.valid:
            self.metrics.increment_counter("token_validations_total", outcome=result.reason.value)
            self.logger.warning("JWT authentication failed", reason=result.reason.value)
            raise AuthenticationError("Not authenticated")

        self.metrics.increment_counter("token_validations_total", outcome="valid")
        set_user_context(str(result.claims.subject))

        request.state.claims = result.claims
        return result.claims
