"""
Token issuance package.

Tokens are compact HS256 JWTs. ``claims`` defines the fixed claim record
shared with ``app.validation``; ``issuer`` mints tokens for verified
identities.
"""
