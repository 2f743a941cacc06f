"""
Data Transfer Objects for the application layer.
"""

from .base_dto import BaseDTO, RequestDTO, ResponseDTO, DocumentRequestDTO
from .auth_dto import TokenRequestDTO, TokenResponseDTO
from .user_dto import CreateUserRequestDTO, UserRoleResponseDTO
from .house_dto import UpdateHouseStatusRequestDTO
from .payment_dto import PaymentIntentRequestDTO, PaymentIntentResponseDTO

__all__ = [
    # Base
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "DocumentRequestDTO",

    # Auth
    "TokenRequestDTO",
    "TokenResponseDTO",

    # Users
    "CreateUserRequestDTO",
    "UserRoleResponseDTO",

    # Houses
    "UpdateHouseStatusRequestDTO",

    # Payments
    "PaymentIntentRequestDTO",
    "PaymentIntentResponseDTO",
]
