"""
Base use case classes for the application layer.
Provides common patterns and structure for use case implementations.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from app.domain.repositories.document_repository import DocumentRepository


class BaseUseCase(ABC):
    """
    Base class for all use cases.
    A use case performs one operation and returns its outcome verbatim;
    failures from the store propagate to the caller untouched.
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__module__)

    @abstractmethod
    async def execute(self, *args: Any, **kwargs: Any) -> Any:
        """Run the use case."""
        pass


class QueryUseCase(BaseUseCase):
    """
    Base class for query use cases (read operations) over one repository.
    """

    def __init__(self, repository: DocumentRepository):
        super().__init__()
        self.repository = repository


class CommandUseCase(BaseUseCase):
    """
    Base class for command use cases (write operations) over one repository.
    """

    def __init__(self, repository: DocumentRepository):
        super().__init__()
        self.repository = repository
