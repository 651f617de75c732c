"""
auth/models.py -- Domain dataclasses for authentication entities.

Pattern: Data class (pure data container, zero logic). The store and the
token helpers do the work.

Layer rule: no imports from api/ or registry/.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Credential:
    """A username/password pair accepted by POST /login.

    Exactly one is seeded from settings at startup. The password is stored and
    compared as plaintext.
    """

    username: str
    password: str


@dataclass
class Identity:
    """The authenticated caller, decoded from a verified bearer token.

    claims keeps the full decoded payload so downstream handlers can read
    anything the token carried beyond the username.
    """

    username: str
    issued_at: datetime | None = None
    expires_at: datetime | None = None
    claims: dict = field(default_factory=dict)
