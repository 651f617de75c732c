"""
api/routes/auth.py -- Login endpoint.

Routes:
  POST /login  -- exchange username/password for a bearer token

Security:
  POST /login is rate-limited per client IP (Settings.login_rate_limit).
  Cache-Control: no-store on every login response so tokens are not cached.
"""

from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from api.limiter import limiter
from api.models import ErrorResponse, LoginRequest, LoginResponse
from auth.errors import InvalidCredentials
from auth.store import CredentialStore
from auth.tokens import authenticate, create_access_token
from core.config import get_settings

# Auth policy: POST /login is public -- it is how a client gets a token.
router = APIRouter()


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"model": ErrorResponse, "description": "Invalid credentials"}},
)
@limiter.limit(get_settings().login_rate_limit)
def login(request: Request, body: Optional[LoginRequest] = None) -> JSONResponse:
    """Authenticate with username and password; return a signed token valid for one hour.

    Wrong username and wrong password produce the same 401 body. A missing
    body or non-string fields never match, so they are 401 as well.
    """
    store: CredentialStore = request.app.state.credential_store
    body = body or LoginRequest()
    try:
        cred = authenticate(store, body.username, body.password)
    except InvalidCredentials as exc:
        resp = JSONResponse(
            status_code=401,
            content=ErrorResponse(code=exc.code, message=exc.message).model_dump(exclude_none=True),
        )
        resp.headers["Cache-Control"] = "no-store"
        return resp

    resp = JSONResponse(content=LoginResponse(token=create_access_token(cred.username)).model_dump())
    resp.headers["Cache-Control"] = "no-store"
    return resp
