"""
Base DTOs for the application layer.
Provides common patterns for request/response data transfer objects.
"""

from pydantic import BaseModel, ConfigDict


class BaseDTO(BaseModel):
    """Base DTO with common configuration."""

    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Convert enum values to their values
        use_enum_values=True,
        extra="forbid",
    )


class RequestDTO(BaseDTO):
    """Base class for request DTOs."""
    pass


class ResponseDTO(BaseDTO):
    """Base class for response DTOs."""
    pass


class DocumentRequestDTO(RequestDTO):
    """
    Base class for request bodies stored as documents.
    Declared fields are required; anything else the client sends is kept.
    """

    model_config = ConfigDict(extra="allow")

    def to_document(self) -> dict:
        """Render the body, declared and extra fields alike, as a document."""
        return self.model_dump(by_alias=True)
