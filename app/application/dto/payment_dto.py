"""
Payment DTOs for the application layer.
"""

from pydantic import ConfigDict, Field

from .base_dto import RequestDTO, ResponseDTO


class PaymentIntentRequestDTO(RequestDTO):
    """DTO for opening a payment intent."""

    model_config = ConfigDict(extra="ignore")

    price: float = Field(..., allow_inf_nan=False, description="Price in major currency units")


class PaymentIntentResponseDTO(ResponseDTO):
    """Client secret of the created intent."""

    client_secret: str = Field(..., alias="clientSecret")
