"""
Auth Service package for the Employee Management services.

This package exposes the FastAPI application for logging users in and
guarding identity data behind bearer tokens. It is intentionally small:

- app.main: Application entrypoint that wires routes and lifecycle.
- app.identity: Identity records, credential checks and login.
- app.tokens: Token claims and the HS256 token issuer.
- app.validation: Token validation (signature, issuer, audience, expiry).
- app.auth_middleware: FastAPI dependency requiring a valid bearer token.

Design notes:
- Keep the package import side-effects minimal; configuration is read when
  the service is constructed, not at import time.
- Use the shared/ utilities for logging, metrics, tracing, and errors.
- Tokens are stateless; the service never stores issued tokens.
"""
