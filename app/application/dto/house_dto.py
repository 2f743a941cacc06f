"""
House DTOs for the application layer.
"""

from typing import Any

from pydantic import ConfigDict

from .base_dto import RequestDTO


class UpdateHouseStatusRequestDTO(RequestDTO):
    """DTO for changing a house's status flag. Other fields are ignored."""

    model_config = ConfigDict(extra="ignore")

    status: Any = None
