"""
registry/models.py -- Domain dataclass for developer records.

Pure data container. All collection logic (id assignment, merging, ordering)
lives in registry/store.py.

A Developer has a small set of known fields plus an open `extra` mapping.
Unknown fields from a request body land in `extra` untouched and are written
back out alongside the known ones. No value is validated, and null is a value
like any other.
"""

from dataclasses import dataclass, field
from typing import Any

KNOWN_FIELDS = ("name", "email", "skills")


class _Unset:
    """Marks a known field the record was never given."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass
class Developer:
    """A developer record.

    id is assigned by the registry on create. Known fields left UNSET are
    omitted from to_dict(); a field explicitly set to None is kept.
    """

    id: Any
    name: Any = UNSET
    email: Any = UNSET
    skills: Any = UNSET
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Developer":
        data = dict(data)
        dev_id = data.pop("id")
        known = {key: data.pop(key) for key in KNOWN_FIELDS if key in data}
        return cls(id=dev_id, extra=data, **known)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id}
        for key in KNOWN_FIELDS:
            value = getattr(self, key)
            if value is not UNSET:
                data[key] = value
        data.update(self.extra)
        return data
