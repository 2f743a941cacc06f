"""
Document mapper.
Converts between MongoDB documents and the plain mappings the application works with.
"""

from typing import Any, Dict, Optional

from bson import ObjectId

from app.domain.models.base import Document, ValidationError


class DocumentMapper:
    """Maps BSON-specific values to JSON-friendly ones and back."""

    @staticmethod
    def to_object_id(document_id: str) -> ObjectId:
        """Parse an id string, rejecting anything that is not a 24-hex ObjectId."""
        if not isinstance(document_id, str) or not ObjectId.is_valid(document_id):
            raise ValidationError(f"Invalid id: {document_id}", field="_id")
        return ObjectId(document_id)

    @classmethod
    def model_to_domain(cls, model: Optional[Dict[str, Any]]) -> Optional[Document]:
        """Convert a stored document, rendering ObjectIds as strings."""
        if model is None:
            return None
        return {key: cls._plain(value) for key, value in model.items()}

    @staticmethod
    def domain_to_model(document: Document) -> Dict[str, Any]:
        """Copy a document for writing; a client-supplied `_id` is not trusted."""
        model = dict(document)
        model.pop("_id", None)
        return model

    @classmethod
    def _plain(cls, value: Any) -> Any:
        if isinstance(value, ObjectId):
            return str(value)
        if isinstance(value, dict):
            return {key: cls._plain(item) for key, item in value.items()}
        if isinstance(value, list):
            return [cls._plain(item) for item in value]
        return value
