"""
api/routes/developers.py -- Developer CRUD routes.

Routes:
  GET    /developers        -- list all developers in insertion order
  POST   /developers        -- create a developer (server-assigned id)
  GET    /developers/{id}   -- fetch one developer
  PUT    /developers/{id}   -- shallow-merge the body into the stored record
  DELETE /developers/{id}   -- remove a developer

All routes require a bearer token. The registry itself does no auth checks.
"""

from fastapi import APIRouter, Depends, HTTPException, Request

from api.models import DeveloperIn, DeveloperOut, ErrorResponse, MessageResponse
from auth.dependencies import get_current_identity
from registry.store import DeveloperNotFound, DeveloperRegistry

# Router-level dependency applies to every route registered on this router,
# so individual handlers don't each need to repeat Depends(get_current_identity).
router = APIRouter(
    dependencies=[Depends(get_current_identity)],
    responses={
        401: {"model": ErrorResponse, "description": "Invalid token"},
        403: {"model": ErrorResponse, "description": "No token provided"},
    },
)

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Developer not found"}}


def _registry(request: Request) -> DeveloperRegistry:
    return request.app.state.registry


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=404,
        detail={"code": "not_found", "message": "Developer not found"},
    )


@router.get("/developers", response_model=list[DeveloperOut])
def list_developers(request: Request) -> list[dict]:
    """Return every developer in the order they were created."""
    return [dev.to_dict() for dev in _registry(request).list_developers()]


@router.post("/developers", response_model=DeveloperOut, status_code=201)
def create_developer(request: Request, body: DeveloperIn) -> dict:
    """Create a developer. Any id in the body is replaced by a server-assigned one."""
    return _registry(request).create(body.to_fields()).to_dict()


@router.get(
    "/developers/{dev_id}",
    response_model=DeveloperOut,
    responses=_NOT_FOUND,
)
def get_developer(request: Request, dev_id: str) -> dict:
    try:
        return _registry(request).get(dev_id).to_dict()
    except DeveloperNotFound as exc:
        raise _not_found() from exc


@router.put(
    "/developers/{dev_id}",
    response_model=DeveloperOut,
    responses=_NOT_FOUND,
)
def update_developer(request: Request, dev_id: str, body: DeveloperIn) -> dict:
    """Merge the body into the stored record.

    Fields in the body overwrite stored ones, fields absent from the body are
    kept. An id in the body replaces the stored id.
    """
    try:
        return _registry(request).update(dev_id, body.to_fields()).to_dict()
    except DeveloperNotFound as exc:
        raise _not_found() from exc


@router.delete("/developers/{dev_id}", response_model=MessageResponse, responses=_NOT_FOUND)
def delete_developer(request: Request, dev_id: str) -> MessageResponse:
    try:
        _registry(request).delete(dev_id)
    except DeveloperNotFound as exc:
        raise _not_found() from exc
    return MessageResponse(message="Developer deleted successfully")
