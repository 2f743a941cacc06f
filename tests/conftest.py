"""
Shared fixtures: in-memory repositories, a recording payment gateway and an
API client wired to both.
"""

import copy
from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from app.domain.models.base import DeleteResult, Document, InsertResult, UpdateResult
from app.domain.repositories import DocumentRepository, Repositories, UserRepository
from app.domain.services.payment_gateway import PaymentGateway
from app.infrastructure.auth import JWTHandler
from app.infrastructure.db.database import get_repositories
from app.infrastructure.mappers.document_mapper import DocumentMapper
from app.infrastructure.payments import get_payment_gateway
from app.main import app


class InMemoryDocumentRepository(DocumentRepository):
    """Document repository keeping documents in insertion order."""

    def __init__(self, documents: Optional[List[Document]] = None):
        self.documents: List[Document] = []
        self.writes = 0
        for document in documents or []:
            self.documents.append({"_id": str(ObjectId()), **document})

    @staticmethod
    def _matches(document: Document, filters: Dict[str, Any]) -> bool:
        return all(document.get(key) == value for key, value in filters.items())

    def _find(self, document_id: str) -> Optional[Document]:
        DocumentMapper.to_object_id(document_id)
        for document in self.documents:
            if document["_id"] == document_id:
                return document
        return None

    async def find_all(self, filters: Optional[Dict[str, Any]] = None) -> List[Document]:
        return [
            copy.deepcopy(document)
            for document in self.documents
            if self._matches(document, filters or {})
        ]

    async def find_one(self, filters: Dict[str, Any]) -> Optional[Document]:
        for document in self.documents:
            if self._matches(document, filters):
                return copy.deepcopy(document)
        return None

    async def find_by_id(self, document_id: str) -> Optional[Document]:
        return copy.deepcopy(self._find(document_id))

    async def insert_one(self, document: Document) -> InsertResult:
        self.writes += 1
        stored = DocumentMapper.domain_to_model(copy.deepcopy(document))
        stored["_id"] = str(ObjectId())
        self.documents.append(stored)
        return InsertResult(inserted_id=stored["_id"])

    async def update_by_id(self, document_id: str, fields: Dict[str, Any]) -> UpdateResult:
        self.writes += 1
        document = self._find(document_id)
        if document is None:
            return UpdateResult(matched_count=0, modified_count=0)
        changed = any(document.get(key, object()) != value for key, value in fields.items())
        document.update(copy.deepcopy(fields))
        return UpdateResult(matched_count=1, modified_count=1 if changed else 0)

    async def delete_by_id(self, document_id: str) -> DeleteResult:
        self.writes += 1
        document = self._find(document_id)
        if document is None:
            return DeleteResult(deleted_count=0)
        self.documents.remove(document)
        return DeleteResult(deleted_count=1)


class InMemoryUserRepository(InMemoryDocumentRepository, UserRepository):
    """User repository keeping users in memory."""
    pass


class RecordingPaymentGateway(PaymentGateway):
    """Payment gateway that records every intent it is asked to create."""

    def __init__(self, client_secret: str = "pi_123_secret_456"):
        self.client_secret = client_secret
        self.calls: List[Dict[str, Any]] = []

    async def create_payment_intent(self, amount, currency, payment_method_types) -> str:
        self.calls.append({
            "amount": amount,
            "currency": currency,
            "payment_method_types": payment_method_types,
        })
        return self.client_secret


TENANT_EMAIL = "tenant@example.com"
OWNER_EMAIL = "owner@example.com"
ADMIN_EMAIL = "admin@example.com"
NEWCOMER_EMAIL = "newcomer@example.com"


@pytest.fixture
def repositories() -> Repositories:
    """Repositories seeded with one user per role and a user without a role."""
    return Repositories(
        users=InMemoryUserRepository([
            {"email": TENANT_EMAIL, "name": "Tina", "role": "Tenant"},
            {"email": OWNER_EMAIL, "name": "Omar", "role": "Owner"},
            {"email": ADMIN_EMAIL, "name": "Ada", "role": "Admin"},
            {"email": NEWCOMER_EMAIL, "name": "Nia"},
        ]),
        houses=InMemoryDocumentRepository([
            {"houseName": "Lake View", "city": "Dhaka", "ownerEmail": OWNER_EMAIL,
             "bedroomNumber": 3, "rentPrice": 25000, "status": "available"},
            {"houseName": "Hill Top", "city": "Chittagong", "ownerEmail": OWNER_EMAIL,
             "bedroomNumber": 2, "rentPrice": 18000, "status": "available"},
            {"houseName": "Old Town", "city": "Dhaka", "ownerEmail": "other@example.com",
             "bedroomNumber": 1, "rentPrice": 9000, "status": "rented"},
        ]),
        testimonials=InMemoryDocumentRepository([
            {"name": "Tina", "quote": "Found a flat in a week."},
        ]),
        agents=InMemoryDocumentRepository([
            {"name": "Rafi", "phone": "+880100000000"},
            {"name": "Sara", "phone": "+880100000001"},
        ]),
        payments=InMemoryDocumentRepository([
            {"email": TENANT_EMAIL, "ownerEmail": OWNER_EMAIL, "price": 25000},
            {"email": "someone@example.com", "ownerEmail": "other@example.com", "price": 9000},
        ]),
        rented_houses=InMemoryDocumentRepository([
            {"renterEmail": TENANT_EMAIL, "houseName": "Lake View", "months": 12},
            {"renterEmail": "someone@example.com", "houseName": "Old Town", "months": 6},
        ]),
    )


@pytest.fixture
def gateway() -> RecordingPaymentGateway:
    return RecordingPaymentGateway()


@pytest.fixture
def client(repositories, gateway):
    """API client over the in-memory repositories; the lifespan is not run."""
    app.dependency_overrides[get_repositories] = lambda: repositories
    app.dependency_overrides[get_payment_gateway] = lambda: gateway
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def jwt_handler() -> JWTHandler:
    return JWTHandler()


@pytest.fixture
def auth_headers(jwt_handler):
    """Build Authorization headers carrying a fresh token for an email."""
    def _headers(email: str) -> Dict[str, str]:
        return {"Authorization": f"Bearer {jwt_handler.issue_token({'email': email})}"}
    return _headers
