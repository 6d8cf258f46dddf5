"""Acting user, as resolved by the upstream auth provider.

The provider authenticates the request and forwards the identity in trusted
``X-User-Id`` and ``X-User-Role`` headers. Permission checks are flat role
comparisons.
"""

from dataclasses import dataclass
from enum import Enum

from fastapi import Header, HTTPException


class Role(str, Enum):
    EVENT_OWNER = "Event Owner"
    STAFF = "Staff"
    ADMIN = "Admin"


@dataclass(frozen=True)
class CurrentUser:
    id: str
    role: Role

    @property
    def is_privileged(self) -> bool:
        return self.role in (Role.ADMIN, Role.STAFF)


def can_manage_event(user: CurrentUser | None, owner_id: str) -> bool:
    """Admins and staff manage every event; owners manage their own."""
    if user is None:
        return False
    return user.is_privileged or user.id == owner_id


async def get_optional_user(
    x_user_id: str | None = Header(default=None),
    x_user_role: str | None = Header(default=None),
) -> CurrentUser | None:
    if not x_user_id:
        return None
    try:
        role = Role(x_user_role) if x_user_role else Role.EVENT_OWNER
    except ValueError:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return CurrentUser(id=x_user_id, role=role)


async def get_current_user(
    x_user_id: str | None = Header(default=None),
    x_user_role: str | None = Header(default=None),
) -> CurrentUser:
    user = await get_optional_user(x_user_id=x_user_id, x_user_role=x_user_role)
    if user is None:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user
