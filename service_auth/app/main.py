"""
Auth service for the Employee Management services.
"""

from datetime import datetime
from typing import List, Optional

from fastapi import Depends
from pydantic import BaseModel

from shared.base_service import BaseService
from shared.clock import Clock, utc_now
from shared.config import ServiceConfig
from shared.errors import AuthenticationError
from shared.observability import get_observability_manager
from shared.tracing import trace_function

from .auth_middleware import AuthMiddleware
from .identity.login import AuthenticationService
from .identity.models import IdentityView, LoginRequest, build_identity_store
from .identity.verifier import AuthenticationFailure, CredentialVerifier
from .tokens.claims import TokenClaims
from .tokens.issuer import TokenIssuer
from .validation.token_validator import TokenValidator


class LoginResponse(BaseModel):
    """Response model for a successful login."""
    token: str
    username: str
    expires_at: datetime


class AuthService(BaseService):
    """Auth service implementation."""

    def __init__(self, config: Optional[ServiceConfig] = None, clock: Clock = utc_now):
        super().__init__("auth", 8010, config)

        # Fails startup when the signing secret is missing
        self.token_issuer = TokenIssuer.from_config(self.config, clock)
        self.token_validator = TokenValidator.from_config(self.config, clock)

        self.identity_store = build_identity_store()
        self.credential_verifier = CredentialVerifier(self.identity_store)
        self.authentication = AuthenticationService(
            self.identity_store,
            self.credential_verifier,
            self.token_issuer
        )

        self.observability = get_observability_manager("auth", self.metrics)
        self.auth_middleware = AuthMiddleware(self.token_validator, self.metrics)

        self._setup_auth_routes()

    def _setup_auth_routes(self):
        """Set up auth-specific routes."""
        require_token = self.auth_middleware

        @self.app.get("/")
        async def root():
            """Root endpoint."""
            return {
                "service": "auth",
                "message": "Employee Management - Auth Service",
                "version": "1.0.0"
            }

        @self.app.post("/api/auth/login", response_model=LoginResponse)
        @trace_function("auth_login")
        async def login(request: LoginRequest):
            """Authenticate a user and return a JWT."""
            self.logger.info("Login attempt", username=request.username)

            with self.metrics.time_operation("token_issue_duration_seconds"):
                outcome = self.authentication.login(request.username, request.password)

            if isinstance(outcome, AuthenticationFailure):
                self.metrics.increment_counter("logins_total", outcome="failure")
                self.observability.log_error(
                    "login_failed",
                    outcome.reason,
                    username=request.username
                )
                raise AuthenticationError("Invalid username or password")

            self.metrics.increment_counter("logins_total", outcome="success")
            self.observability.log_business_event("user_logged_in", username=outcome.username)

            return LoginResponse(
                token=outcome.token,
                username=outcome.username,
                expires_at=outcome.expires_at
            )

        @self.app.get("/api/auth/users", response_model=List[IdentityView])
        @trace_function("auth_list_users")
        async def list_users(claims: TokenClaims = Depends(require_token)):
            """List all users. Requires a valid bearer token."""
            self.observability.trace_request(str(claims.subject))
            return self.authentication.list_identities(claims)

    async def _check_dependencies(self):
        """Check auth dependencies."""
        return {
            "identity_store": "ok" if self.identity_store.count() > 0 else "empty"
        }


def create_app(config: Optional[ServiceConfig] = None, clock: Clock = utc_now):
    """Create FastAPI application."""
    service = AuthService(config, clock)
    return service.app


if __name__ == "__main__":
    service = AuthService()
    service.run()
