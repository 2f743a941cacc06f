"""
Document repository implementation using PyMongo's asyncio client.
"""

import logging
from typing import Optional, List, Dict, Any

from pymongo.asynchronous.collection import AsyncCollection

from app.domain.models.base import Document, InsertResult, UpdateResult, DeleteResult
from app.domain.repositories.document_repository import DocumentRepository
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.mappers.document_mapper import DocumentMapper

logger = logging.getLogger(__name__)


class MongoDocumentRepository(DocumentRepository):
    """MongoDB implementation of the document repository."""

    def __init__(self, collection: AsyncCollection):
        self.collection = collection
        self.mapper = DocumentMapper()

    async def find_all(self, filters: Optional[Dict[str, Any]] = None) -> List[Document]:
        """Find every document matching the filters."""
        cursor = self.collection.find(filters or {})
        models = await cursor.to_list()
        return [self.mapper.model_to_domain(model) for model in models]

    async def find_one(self, filters: Dict[str, Any]) -> Optional[Document]:
        """Find the first document matching the filters."""
        model = await self.collection.find_one(filters)
        return self.mapper.model_to_domain(model)

    async def find_by_id(self, document_id: str) -> Optional[Document]:
        """Find a document by id."""
        model = await self.collection.find_one(
            {"_id": self.mapper.to_object_id(document_id)}
        )
        return self.mapper.model_to_domain(model)

    async def insert_one(self, document: Document) -> InsertResult:
        """Insert a document."""
        result = await self.collection.insert_one(self.mapper.domain_to_model(document))
        logger.debug(f"Inserted {result.inserted_id} into {self.collection.name}")
        return InsertResult(
            inserted_id=str(result.inserted_id),
            acknowledged=result.acknowledged,
        )

    async def update_by_id(self, document_id: str, fields: Dict[str, Any]) -> UpdateResult:
        """Set fields on a document."""
        result = await self.collection.update_one(
            {"_id": self.mapper.to_object_id(document_id)},
            {"$set": fields}
        )
        return UpdateResult(
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_id=str(result.upserted_id) if result.upserted_id is not None else None,
            acknowledged=result.acknowledged,
        )

    async def delete_by_id(self, document_id: str) -> DeleteResult:
        """Delete a document."""
        result = await self.collection.delete_one(
            {"_id": self.mapper.to_object_id(document_id)}
        )
        logger.debug(f"Deleted {result.deleted_count} document(s) from {self.collection.name}")
        return DeleteResult(
            deleted_count=result.deleted_count,
            acknowledged=result.acknowledged,
        )


class MongoUserRepository(MongoDocumentRepository, UserRepository):
    """MongoDB implementation of the user repository."""
    pass
