"""
Document repository interface.
Defines the contract every collection-backed repository fulfils.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Dict, Any

from app.domain.models.base import Document, InsertResult, UpdateResult, DeleteResult


class DocumentRepository(ABC):
    """
    Repository interface for one collection of free-form documents.
    Ids cross this boundary as strings; documents come back with `_id` as a string.
    """

    @abstractmethod
    async def find_all(self, filters: Optional[Dict[str, Any]] = None) -> List[Document]:
        """
        Find every document matching the equality filters.
        No filters returns the whole collection in natural order.
        """
        pass

    @abstractmethod
    async def find_one(self, filters: Dict[str, Any]) -> Optional[Document]:
        """
        Find the first document matching the equality filters.
        """
        pass

    @abstractmethod
    async def find_by_id(self, document_id: str) -> Optional[Document]:
        """
        Find a document by its id.
        Raises ValidationError when the id is malformed.
        """
        pass

    @abstractmethod
    async def insert_one(self, document: Document) -> InsertResult:
        """
        Insert a document as given.
        """
        pass

    @abstractmethod
    async def update_by_id(self, document_id: str, fields: Dict[str, Any]) -> UpdateResult:
        """
        Set the given fields on the document with this id.
        """
        pass

    @abstractmethod
    async def delete_by_id(self, document_id: str) -> DeleteResult:
        """
        Hard delete the document with this id.
        """
        pass
