"""Roles and role assignments."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

ROLE_PUBLIC = "public"


@dataclass
class Role:
    """A named role that users may be assigned to."""

    id: str = ""
    slug: str = ""
    name: str = ""
    created_at: datetime | None = None

    def clone(self) -> Role:
        """Return a copy of this role."""
        return replace(self)


@dataclass
class UserRole:
    """Assignment of a role to a user."""

    id: str = ""
    user_id: str = ""
    role_id: str = ""
    created_at: datetime | None = None