"""
Base value objects and exceptions for the domain layer.
Documents are free-form mappings; the types here describe the results of
writing them and the errors raised while doing so.
"""

from typing import Optional, Any, Dict
from dataclasses import dataclass


Document = Dict[str, Any]


@dataclass(frozen=True)
class InsertResult:
    """Acknowledgement of a single-document insert."""

    inserted_id: str
    acknowledged: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "acknowledged": self.acknowledged,
            "insertedId": self.inserted_id,
        }


@dataclass(frozen=True)
class UpdateResult:
    """Acknowledgement of a single-document update."""

    matched_count: int
    modified_count: int
    upserted_id: Optional[str] = None
    acknowledged: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "acknowledged": self.acknowledged,
            "modifiedCount": self.modified_count,
            "upsertedId": self.upserted_id,
            "upsertedCount": 1 if self.upserted_id else 0,
            "matchedCount": self.matched_count,
        }


@dataclass(frozen=True)
class DeleteResult:
    """Acknowledgement of a single-document delete."""

    deleted_count: int
    acknowledged: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "acknowledged": self.acknowledged,
            "deletedCount": self.deleted_count,
        }


class DomainException(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """Exception raised when input cannot be used as given."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, "VALIDATION_ERROR")
        self.field = field


class AuthenticationError(DomainException):
    """Exception raised when a session token is missing or cannot be trusted."""

    def __init__(self, message: str = "Unauthorized Access..."):
        super().__init__(message, "UNAUTHORIZED")

