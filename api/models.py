"""
API request and response models for the Developers API.

These Pydantic v2 models define the HTTP transport contract for the API layer.
They are intentionally separate from the dataclasses in registry/models.py and
auth/models.py, which own the internal domain representation. Route handlers
map between the two.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------


class LoginRequest(BaseModel):
    """Request body for POST /login.

    Fields are optional and untyped so a missing or non-string value is
    reported as bad credentials (401) rather than a validation error.
    """

    username: Any = None
    password: Any = None


class LoginResponse(BaseModel):
    token: str


# ---------------------------------------------------------------------------
# Developers
# ---------------------------------------------------------------------------


class DeveloperIn(BaseModel):
    """Request body for POST /developers and PUT /developers/{id}.

    name, email and skills are named for the schema but not type-checked;
    anything else is accepted as-is (extra="allow"). Every value, null
    included, is stored verbatim on the record.
    """

    model_config = ConfigDict(extra="allow")

    id: Any = None
    name: Any = None
    email: Any = None
    skills: Any = None

    def to_fields(self) -> dict[str, Any]:
        """Return only the fields the client actually sent, extras included."""
        fields = {name: getattr(self, name) for name in self.model_fields_set if name in DeveloperIn.model_fields}
        fields.update(self.model_extra or {})
        return fields


class DeveloperOut(BaseModel):
    """A stored developer record: id plus whatever fields it was given.

    Only id is declared so unset fields are never filled in with defaults.
    """

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "properties": {
                "id": {"type": "string"},
                "name": {"type": "string"},
                "email": {"type": "string"},
                "skills": {"type": "array", "items": {"type": "string"}},
            }
        },
    )

    id: Any


# ---------------------------------------------------------------------------
# Shared
# ---------------------------------------------------------------------------


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Body of every error response: a client-facing message plus a stable code."""

    message: str
    code: str
    detail: Optional[str] = None


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
