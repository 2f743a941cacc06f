"""
User use cases for the application layer.
Implements registration, role lookups and promotion.
"""

from typing import Any, Dict, List, Optional

from app.application.use_cases.base_use_case import BaseUseCase, CommandUseCase, QueryUseCase
from app.domain.models.base import Document, UpdateResult
from app.domain.models.user import UserRole
from app.domain.repositories.user_repository import UserRepository
from app.domain.services.role_resolver import RoleResolver

USER_EXISTS_MESSAGE = "Users Already Exists..."


class ListUsersUseCase(QueryUseCase):
    """Use case for listing every user."""

    async def execute(self) -> List[Document]:
        return await self.repository.find_all()


class GetUserRoleUseCase(QueryUseCase):
    """Use case for reporting the raw role field stored for an email."""

    repository: UserRepository

    async def execute(self, email: str) -> Dict[str, Any]:
        user = await self.repository.find_by_email(email)
        return {"role": user.get("role") if user else None}


class CheckOwnRoleUseCase(BaseUseCase):
    """
    Use case answering whether the caller holds a role.
    Callers may only ask about themselves; asking about anyone else is
    answered False without touching the store.
    """

    def __init__(self, role_resolver: RoleResolver):
        super().__init__()
        self.role_resolver = role_resolver

    async def execute(self, caller_email: Optional[str], email: str, role: UserRole) -> bool:
        if caller_email != email:
            return False
        return await self.role_resolver.has_role(email, role)


class RegisterUserUseCase(CommandUseCase):
    """
    Use case for registering a user.
    Registration is idempotent by email: an existing user is left as is.
    """

    repository: UserRepository

    async def execute(self, document: Document) -> Dict[str, Any]:
        if await self.repository.exists_by_email(document.get("email")):
            self.logger.info(f"User {document.get('email')} already registered")
            return {"message": USER_EXISTS_MESSAGE}

        result = await self.repository.insert_one(document)
        self.logger.info(f"Registered user {document.get('email')} as {result.inserted_id}")
        return result.to_dict()


class PromoteUserToAdminUseCase(CommandUseCase):
    """Use case for promoting a user to Admin."""

    async def execute(self, user_id: str) -> UpdateResult:
        result = await self.repository.update_by_id(user_id, {"role": UserRole.ADMIN.value})
        self.logger.info(f"Promoted user {user_id} to Admin (matched {result.matched_count})")
        return result
