"""
Tests for shared configuration and error types.
"""

import pytest

from shared.config import get_config
from shared.errors import (
    AuthenticationError,
    ConfigurationError,
    NotFoundError,
    ValidationError,
)


class TestServiceConfig:
    """Test cases for ServiceConfig."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("EMS_JWT_SECRET_KEY", raising=False)
        config = get_config("auth", 8010)

        assert config.service_name == "auth"
        assert config.port == 8010
        assert config.jwt_issuer == "EmployeeManagementAPI"
        assert config.jwt_audience == "EmployeeManagementClient"
        assert config.jwt_expiration_minutes == 60
        assert config.jwt_secret_key is None

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("EMS_JWT_SECRET_KEY", "from-env")
        monkeypatch.setenv("EMS_JWT_EXPIRATION_MINUTES", "15")
        config = get_config("auth", 8010)

        assert config.require_signing_secret() == "from-env"
        assert config.jwt_expiration_minutes == 15

    @pytest.mark.parametrize("secret", [None, "", "   "])
    def test_missing_secret_is_configuration_error(self, monkeypatch, secret):
        monkeypatch.delenv("EMS_JWT_SECRET_KEY", raising=False)
        config = get_config("auth", 8010, jwt_secret_key=secret)

        with pytest.raises(ConfigurationError) as exc_info:
            config.require_signing_secret()
        assert exc_info.value.code == "CONFIGURATION_ERROR"

    def test_non_positive_lifetime_rejected(self):
        with pytest.raises(ConfigurationError):
            get_config("auth", 8010, jwt_expiration_minutes=0)


class TestErrors:
    """Test cases for error types."""

    @pytest.mark.parametrize("error, status_code, code", [
        (AuthenticationError(), 401, "AUTHENTICATION_ERROR"),
        (ValidationError(), 400, "VALIDATION_ERROR"),
        (NotFoundError(), 404, "NOT_FOUND"),
    ])
    def test_status_and_code(self, error, status_code, code):
        assert error.status_code == status_code
        assert error.code == code

    def test_to_response(self):
        response = NotFoundError("Employee with ID 9 not found", details={"employee_id": 9}).to_response()

        assert response.code == "NOT_FOUND"
        assert response.message == "Employee with ID 9 not found"
        assert response.details == {"employee_id": 9}
        assert response.trace_id is None
