"""
auth/errors.py -- Failure taxonomy for the authentication gate.

Each error carries the client-facing message. The route layer (see
auth/dependencies.py and api/routes/auth.py) decides the HTTP status:

  MissingToken        -> 403
  InvalidToken        -> 401
  InvalidCredentials  -> 401
"""

from __future__ import annotations


class AuthError(Exception):
    """Base class for every authentication failure."""

    code = "unauthorized"
    message = "Authentication failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message


class MissingToken(AuthError):
    """No Authorization header on a protected route."""

    code = "missing_token"
    message = "No token provided"


class InvalidToken(AuthError):
    """Malformed, wrongly signed, or expired token."""

    code = "invalid_token"
    message = "Invalid token"


class InvalidCredentials(AuthError):
    """Login with a username/password pair that matches no credential."""

    code = "bad_credentials"
    message = "Invalid credentials"
