"""
User DTOs for the application layer.
"""

from typing import Any

from pydantic import Field

from .base_dto import DocumentRequestDTO, ResponseDTO


class CreateUserRequestDTO(DocumentRequestDTO):
    """DTO for registering a user; profile fields beyond email are kept as sent."""

    email: str = Field(..., min_length=1, description="User email, the identity key")


class UserRoleResponseDTO(ResponseDTO):
    """Role field of a user as stored, None when the user is unknown or has none."""

    role: Any = None
