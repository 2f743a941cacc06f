"""
Role resolution service.
Looks up the role currently stored for an identity.
"""

import logging
from typing import Optional

from app.domain.models.user import UserRole, role_of
from app.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class RoleResolver:
    """
    Resolves an email to the role held in the user store.
    Always reads through to the repository; nothing is cached.
    """

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def resolve_role(self, email: Optional[str]) -> Optional[UserRole]:
        """
        Return the stored role for this email.

        Returns None when no user record exists for the email.
        """
        if not email:
            return None

        user = await self.user_repository.find_by_email(email)
        role = role_of(user)
        logger.debug(f"Resolved role for {email}: {role.value if role else None}")
        return role

    async def has_role(self, email: Optional[str], required_role: UserRole) -> bool:
        """Check whether the stored role for this email is exactly the required one."""
        return await self.resolve_role(email) == required_role
