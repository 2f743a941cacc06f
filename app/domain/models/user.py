"""
User domain model.
Users are identified by email and carry a single marketplace role.
"""

from enum import Enum
from typing import Any, Optional

from app.domain.models.base import Document


class UserRole(str, Enum):
    """Marketplace roles as stored on the user document."""
    TENANT = "Tenant"
    OWNER = "Owner"
    ADMIN = "Admin"
    UNASSIGNED = "Unassigned"

    @classmethod
    def from_value(cls, value: Any) -> "UserRole":
        """
        Map a stored role field onto the enumeration.
        Missing, empty and unknown values are all UNASSIGNED.
        """
        for role in (cls.TENANT, cls.OWNER, cls.ADMIN):
            if value == role.value:
                return role
        return cls.UNASSIGNED


def role_of(user: Optional[Document]) -> Optional[UserRole]:
    """Role held by a user document, None when there is no document."""
    if user is None:
        return None
    return UserRole.from_value(user.get("role"))
