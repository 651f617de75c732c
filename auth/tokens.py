"""
auth/tokens.py -- JWT issue / verify and credential check.

Design decisions:
  JWT: python-jose with HS256. Tokens are signed with SECRET_KEY and carry
       the username (as both `sub` and `username`), `iat` and `exp`. Nothing
       is stored server-side: a token is valid exactly when its signature
       checks out and it has not expired.

  Errors: unlike a None-returning decoder, every helper here raises one of
       the auth.errors types so the dependency layer can tell a missing
       header (403) from a bad token (401).

  SECRET_KEY: sourced from core.config.get_settings(), which refuses to start
       in production mode without one.

Layer rule: no imports from api/ or registry/. Import from core/ is allowed.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from jose import JWTError, jwt

from auth.errors import InvalidCredentials, InvalidToken, MissingToken
from auth.models import Identity
from core.config import get_settings

if TYPE_CHECKING:
    from auth.models import Credential
    from auth.store import CredentialStore

logger = logging.getLogger("devapi.auth")

# ---------------------------------------------------------------------------
# Config -- read once at module load via the lru_cache singleton
# ---------------------------------------------------------------------------

_settings = get_settings()

_ALGORITHM = "HS256"


# ---------------------------------------------------------------------------
# Login
# ---------------------------------------------------------------------------


def authenticate(store: CredentialStore, username: object, password: object) -> Credential:
    """Return the matching credential or raise InvalidCredentials.

    The same error is raised for an unknown username and for a wrong password.
    """
    cred = store.find(username, password)
    if cred is None:
        logger.warning("Failed login for username=%r", username)
        raise InvalidCredentials()
    logger.info("Issued token for username=%r", cred.username)
    return cred


# ---------------------------------------------------------------------------
# JWT encode / decode
# ---------------------------------------------------------------------------


def create_access_token(username: str, expire_seconds: int = 0, issued_at: datetime | None = None) -> str:
    """Encode a signed JWT for username.

    Args:
        username:       Stored as both the `sub` and `username` claims.
        expire_seconds: Token lifetime. If 0 (default), uses
                        Settings.token_expire_seconds (1 hour).
        issued_at:      Issue time; defaults to now. Tests pass a past value
                        to mint an already-expired token.
    """
    duration = expire_seconds if expire_seconds > 0 else _settings.token_expire_seconds
    issued = issued_at or datetime.now(timezone.utc)
    payload = {
        "sub": username,
        "username": username,
        "iat": issued,
        "exp": issued + timedelta(seconds=duration),
    }
    return jwt.encode(payload, _settings.secret_key, algorithm=_ALGORITHM)


def decode_access_token(token: str) -> Identity:
    """Verify signature and expiry; return the decoded Identity.

    Raises InvalidToken on any failure, including a payload with no username.
    """
    try:
        payload = jwt.decode(token, _settings.secret_key, algorithms=[_ALGORITHM])
    except JWTError as exc:
        raise InvalidToken() from exc
    username = payload.get("username") or payload.get("sub")
    if not username:
        raise InvalidToken()
    return Identity(
        username=username,
        issued_at=_from_timestamp(payload.get("iat")),
        expires_at=_from_timestamp(payload.get("exp")),
        claims=payload,
    )


# ---------------------------------------------------------------------------
# Authorization header
# ---------------------------------------------------------------------------


def extract_token(header_value: str | None) -> str:
    """Return the token part of an Authorization header value.

    The value is expected as `<scheme> <token>`. Only the second
    whitespace-delimited segment is used; the scheme word is not checked.
    An absent or empty header raises MissingToken, a header with no second
    segment raises InvalidToken.
    """
    if not header_value:
        raise MissingToken()
    parts = header_value.split()
    if len(parts) < 2:
        raise InvalidToken()
    return parts[1]


def verify_authorization(header_value: str | None) -> Identity:
    """Extract and verify the bearer token in one step."""
    return decode_access_token(extract_token(header_value))


def _from_timestamp(value) -> datetime | None:
    if value is None:
        return None
    return datetime.fromtimestamp(value, tz=timezone.utc)
