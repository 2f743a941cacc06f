"""
Repository implementations for the infrastructure layer.
"""

from .mongo_repository import MongoDocumentRepository, MongoUserRepository

__all__ = [
    "MongoDocumentRepository",
    "MongoUserRepository",
]
