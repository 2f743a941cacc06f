"""
Authentication DTOs for the application layer.
"""

from pydantic import Field

from .base_dto import DocumentRequestDTO, ResponseDTO


class TokenRequestDTO(DocumentRequestDTO):
    """Claims to sign into a session token. Extra claims are carried through."""

    email: str = Field(..., min_length=1, description="Caller email")


class TokenResponseDTO(ResponseDTO):
    """Signed session token."""

    token: str
