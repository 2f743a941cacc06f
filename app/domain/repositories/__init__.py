"""
Repository interfaces for the domain layer.
This module exports all repository interfaces (ports) for dependency injection.
"""

from dataclasses import dataclass

from .document_repository import DocumentRepository
from .user_repository import UserRepository


@dataclass(frozen=True)
class Repositories:
    """One repository per collection, handed to every request handler."""

    users: UserRepository
    houses: DocumentRepository
    testimonials: DocumentRepository
    agents: DocumentRepository
    payments: DocumentRepository
    rented_houses: DocumentRepository


__all__ = [
    "DocumentRepository",
    "UserRepository",
    "Repositories",
]
