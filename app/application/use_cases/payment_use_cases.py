"""
Payment use cases for the application layer.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import List

from app.application.use_cases.base_use_case import BaseUseCase
from app.domain.services.payment_gateway import PaymentGateway


def to_minor_units(price: float) -> int:
    """Convert a price in major units to the gateway's minor units."""
    return int((Decimal(str(price)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class CreatePaymentIntentUseCase(BaseUseCase):
    """
    Use case for opening a charge with the payment gateway.
    Nothing is stored; the client records the payment once it completes.
    """

    def __init__(self, gateway: PaymentGateway, currency: str, payment_method_types: List[str]):
        super().__init__()
        self.gateway = gateway
        self.currency = currency
        self.payment_method_types = payment_method_types

    async def execute(self, price: float) -> str:
        return await self.gateway.create_payment_intent(
            amount=to_minor_units(price),
            currency=self.currency,
            payment_method_types=list(self.payment_method_types),
        )
