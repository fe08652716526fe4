"""
Shared utilities for the Employee Management services.

This package aggregates common building blocks consumed by all services:

- config: Service configuration via pydantic-settings
- logging: Structured logging with trace correlation
- metrics: Prometheus metrics helpers
- tracing: OpenTelemetry tracing config
- observability: Request context plus error/business event reporting
- errors: Canonical error types and responses
- store: Thread-safe in-memory record store
- clock: Injectable UTC time source

Any cross-service logic should live here to avoid import cycles across
service packages. Do not import from service_* packages into shared/.
"""
