"""Authentication models shared across API projects."""

from dataclasses import dataclass
from typing import Optional

from lingoletics.shared.rbac.models import UserRole
from lingoletics.shared.rbac.service import to_role


@dataclass
class User:
    """Authenticated user model.

    role may be given as a UserRole or its string value; unknown roles
    raise InvalidRBACValueError.
    """
    email: str
    user_id: int
    name: str
    role: UserRole
    institution_id: Optional[int] = None
    picture: Optional[str] = None

    def __post_init__(self):
        self.role = to_role(self.role)
