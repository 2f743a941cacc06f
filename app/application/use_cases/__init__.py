"""
Application layer use cases.
Business logic for the rental marketplace.
"""

from .base_use_case import BaseUseCase, QueryUseCase, CommandUseCase
from .document_use_cases import (
    ListDocumentsUseCase,
    CreateDocumentUseCase,
    DeleteDocumentUseCase,
)
from .user_use_cases import (
    USER_EXISTS_MESSAGE,
    ListUsersUseCase,
    GetUserRoleUseCase,
    CheckOwnRoleUseCase,
    RegisterUserUseCase,
    PromoteUserToAdminUseCase,
)
from .house_use_cases import (
    ListHousesUseCase,
    ListOwnerHousesUseCase,
    GetHouseByIdUseCase,
    UpdateHouseDetailsUseCase,
    UpdateHouseStatusUseCase,
)
from .payment_use_cases import CreatePaymentIntentUseCase, to_minor_units

__all__ = [
    # Base Use Cases
    "BaseUseCase",
    "QueryUseCase",
    "CommandUseCase",

    # Document Use Cases
    "ListDocumentsUseCase",
    "CreateDocumentUseCase",
    "DeleteDocumentUseCase",

    # User Use Cases
    "USER_EXISTS_MESSAGE",
    "ListUsersUseCase",
    "GetUserRoleUseCase",
    "CheckOwnRoleUseCase",
    "RegisterUserUseCase",
    "PromoteUserToAdminUseCase",

    # House Use Cases
    "ListHousesUseCase",
    "ListOwnerHousesUseCase",
    "GetHouseByIdUseCase",
    "UpdateHouseDetailsUseCase",
    "UpdateHouseStatusUseCase",

    # Payment Use Cases
    "CreatePaymentIntentUseCase",
    "to_minor_units",
]
