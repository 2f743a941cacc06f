"""
Generic document use cases.
Shared by the collections whose operations carry no extra rules
(testimonials, agents, payments and rented houses).
"""

from typing import Any, Dict, List, Optional

from app.application.use_cases.base_use_case import CommandUseCase, QueryUseCase
from app.domain.models.base import Document, InsertResult, DeleteResult


class ListDocumentsUseCase(QueryUseCase):
    """Use case for listing a collection, optionally filtered on one field."""

    async def execute(self, field: Optional[str] = None, value: Optional[Any] = None) -> List[Document]:
        filters: Dict[str, Any] = {}
        if field is not None:
            filters[field] = value
        return await self.repository.find_all(filters)


class CreateDocumentUseCase(CommandUseCase):
    """Use case for appending a document to a collection."""

    async def execute(self, document: Document) -> InsertResult:
        return await self.repository.insert_one(document)


class DeleteDocumentUseCase(CommandUseCase):
    """Use case for hard deleting a document. Nothing else is touched."""

    async def execute(self, document_id: str) -> DeleteResult:
        result = await self.repository.delete_by_id(document_id)
        self.logger.info(f"Deleted document {document_id} ({result.deleted_count} removed)")
        return result
