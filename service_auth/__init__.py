"""Auth service: credential verification and bearer token issuance."""
