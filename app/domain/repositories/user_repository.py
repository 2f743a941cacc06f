"""
User repository interface.
Defines the contract for user data persistence operations.
"""

from typing import Optional

from app.domain.models.base import Document
from app.domain.repositories.document_repository import DocumentRepository


class UserRepository(DocumentRepository):
    """
    Repository for the users collection.
    Email is the identity key.
    """

    async def find_by_email(self, email: str) -> Optional[Document]:
        """
        Find a user by their email address.
        """
        return await self.find_one({"email": email})

    async def exists_by_email(self, email: str) -> bool:
        """
        Check if a user exists with the given email.
        """
        return await self.find_by_email(email) is not None
