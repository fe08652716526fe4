"""
Shared configuration management for the Employee Management services.
"""

from typing import Optional

from pydantic import Field, ValidationError as SettingsValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from shared.errors import ConfigurationError


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_prefix="EMS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    env: str = "local"
    log_level: str = "info"

    # Security
    jwt_secret_key: Optional[str] = None
    jwt_issuer: str = "EmployeeManagementAPI"
    jwt_audience: str = "EmployeeManagementClient"
    jwt_expiration_minutes: int = Field(default=60, gt=0)

    # Observability
    enable_tracing: bool = False
    otel_exporter: str = "http://localhost:4317"
    enable_console_tracing: bool = False


class ServiceConfig(BaseConfig):
    """Service-specific configuration."""

    service_name: str
    port: int
    host: str = "0.0.0.0"

    def __init__(self, service_name: str, port: int, **kwargs):
        super().__init__(service_name=service_name, port=port, **kwargs)

    def require_signing_secret(self) -> str:
        """Return the JWT signing secret or fail startup when it is missing."""
        secret = (self.jwt_secret_key or "").strip()
        if not secret:
            raise ConfigurationError(
                "JWT secret key not configured",
                details={"setting": "EMS_JWT_SECRET_KEY"}
            )
        return self.jwt_secret_key


def get_config(service_name: str, port: int, **overrides) -> ServiceConfig:
    """Get configuration for a specific service."""
    try:
        return ServiceConfig(service_name=service_name, port=port, **overrides)
    except SettingsValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration for {service_name}",
            details={"errors": [err["msg"] for err in e.errors()]}
        ) from e
