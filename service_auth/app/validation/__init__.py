"""
Token validation package.

Provides the validator used by the Auth Service to accept or reject bearer
tokens it issued. Responsibilities:

- Validating token structure, signature, issuer, audience, and expiry.
- Reporting a failure reason for diagnostics without exposing it to clients.
- Extracting identity claims into a fixed ``TokenClaims`` record.

Validation is purely local: tokens are HS256-signed with the service secret
and nothing is fetched or stored.
"""
