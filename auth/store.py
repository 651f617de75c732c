"""
auth/store.py -- In-memory credential store.

Holds the credentials accepted by POST /login. The set is loaded once at
startup (see api/main.py lifespan) and never mutated afterwards, so lookups
need no locking.

Usage:
    store = CredentialStore.from_settings(get_settings())
    cred = store.find("admin", "admin123")   # Credential or None
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from auth.models import Credential

if TYPE_CHECKING:
    from core.config import Settings


class CredentialStore:
    def __init__(self, credentials: Iterable[Credential]) -> None:
        self._credentials: tuple[Credential, ...] = tuple(credentials)

    @classmethod
    def from_settings(cls, settings: Settings) -> CredentialStore:
        """Build the store holding the single seeded admin credential."""
        return cls([Credential(username=settings.admin_username, password=settings.admin_password)])

    def find(self, username: object, password: object) -> Credential | None:
        """Return the credential matching both fields exactly, or None.

        Case-sensitive plaintext comparison. None and non-string values
        never match.
        """
        if not isinstance(username, str) or not isinstance(password, str):
            return None
        for cred in self._credentials:
            if cred.username == username and cred.password == password:
                return cred
        return None

    def __len__(self) -> int:
        return len(self._credentials)
