"""Partial profile update."""

from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True)
class UserPatch:
    """Profile fields to change; ``None`` or empty string means "keep".

    Email, role, password hash and the blocked flag are not
    patchable through this object.
    """

    name: str | None = None
    surname: str | None = None
    username: str | None = None
    phone_number: str | None = None

    def changes(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name)
        }

    def is_empty(self) -> bool:
        return not self.changes()
