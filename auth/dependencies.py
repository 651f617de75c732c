"""
auth/dependencies.py -- FastAPI Depends() helpers for authentication.

One auth method: an `Authorization: <scheme> <token>` header carrying a JWT
issued by POST /login. Only the token segment is used.

get_current_identity() turns the auth.errors taxonomy into HTTP errors:
  MissingToken  -> 403
  InvalidToken  -> 401

Layer rule: no imports from api/ or registry/.
  auth/dependencies.py may import from fastapi (for HTTPException/Request)
  because this module is part of the FastAPI dependency injection system.
"""

from __future__ import annotations

from fastapi import HTTPException, Request

from auth.errors import AuthError, MissingToken
from auth.models import Identity
from auth.tokens import verify_authorization


def get_current_identity(request: Request) -> Identity:
    """Require a valid bearer token. Attaches the Identity to request.state.

    Use as a FastAPI dependency:
        router = APIRouter(dependencies=[Depends(get_current_identity)])
    """
    try:
        identity = verify_authorization(request.headers.get("Authorization"))
    except AuthError as exc:
        status = 403 if isinstance(exc, MissingToken) else 401
        raise HTTPException(
            status_code=status,
            detail={"code": exc.code, "message": exc.message},
        ) from exc
    request.state.identity = identity
    return identity
