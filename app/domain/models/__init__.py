"""
Domain models for the rental marketplace.
This module exports the domain value objects, roles and exceptions.
"""

from .base import (
    Document,
    InsertResult,
    UpdateResult,
    DeleteResult,
    DomainException,
    ValidationError,
    AuthenticationError,
)
from .user import UserRole, role_of
from .house import EDITABLE_HOUSE_FIELDS, editable_fields

__all__ = [
    "Document",
    "InsertResult",
    "UpdateResult",
    "DeleteResult",
    "DomainException",
    "ValidationError",
    "AuthenticationError",
    "UserRole",
    "role_of",
    "EDITABLE_HOUSE_FIELDS",
    "editable_fields",
]
