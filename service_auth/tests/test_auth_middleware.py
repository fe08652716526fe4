"""
Unit tests for AuthMiddleware.
"""

import pytest
from unittest.mock import MagicMock
from fastapi import Request

from shared.errors import AuthenticationError
from shared.metrics import MetricsCollector
from service_auth.app.auth_middleware import AuthMiddleware
from service_auth.app.tokens.issuer import TokenIssuer
from service_auth.app.validation.token_validator import TokenValidator

SECRET = "unit-test-signing-secret-0123456789"
ISSUER = "EmployeeManagementAPI"
AUDIENCE = "EmployeeManagementClient"


class TestAuthMiddleware:
    """Test cases for AuthMiddleware."""

    @pytest.fixture
    def metrics(self):
        return MetricsCollector("auth")

    @pytest.fixture
    def auth_middleware(self, metrics):
        """Create AuthMiddleware instance."""
        return AuthMiddleware(TokenValidator(SECRET, ISSUER, AUDIENCE), metrics)

    @pytest.fixture
    def token(self):
        return TokenIssuer(SECRET, ISSUER, AUDIENCE).issue(2, "user1", "User").token

    @pytest.fixture
    def mock_request(self):
        """Create mock request."""
        request = MagicMock(spec=Request)
        request.headers = {}
        return request

    @pytest.mark.asyncio
    async def test_authenticate_request_success(self, auth_middleware, mock_request, token):
        mock_request.headers = {"Authorization": f"Bearer {token}"}

        claims = await auth_middleware(mock_request)

        assert claims.subject == 2
        assert claims.username == "user1"
        assert claims.role == "User"
        assert mock_request.state.claims == claims

    @pytest.mark.asyncio
    async def test_scheme_is_case_insensitive(self, auth_middleware, mock_request, token):
        mock_request.headers = {"Authorization": f"bearer {token}"}

        claims = await auth_middleware(mock_request)
        assert claims.username == "user1"

    @pytest.mark.asyncio
    async def test_missing_header(self, auth_middleware, mock_request, metrics):
        with pytest.raises(AuthenticationError):
            await auth_middleware(mock_request)

        counter = metrics.get_metric("token_validations_total")
        assert counter.labels(outcome="missing")._value.get() == 1

    @pytest.mark.asyncio
    async def test_invalid_token(self, auth_middleware, mock_request, metrics):
        mock_request.headers = {"Authorization": "Bearer abc.def.ghi"}

        with pytest.raises(AuthenticationError) as exc_info:
            await auth_middleware(mock_request)

        assert exc_info.value.message == "Not authenticated"
        counter = metrics.get_metric("token_validations_total")
        assert counter.labels(outcome="malformed")._value.get() == 1

    @pytest.mark.asyncio
    async def test_wrong_scheme(self, auth_middleware, mock_request, token):
        mock_request.headers = {"Authorization": f"Token {token}"}

        with pytest.raises(AuthenticationError):
            await auth_middleware(mock_request)
