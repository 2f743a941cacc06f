"""
Payment gateway service interface.
"""

from abc import ABC, abstractmethod
from typing import List


class PaymentGateway(ABC):
    """
    Payment gateway interface.
    Creates charge intents that the client completes on its side.
    """

    @abstractmethod
    async def create_payment_intent(
        self,
        amount: int,
        currency: str,
        payment_method_types: List[str]
    ) -> str:
        """
        Create a payment intent for an amount in minor currency units.
        Returns the client secret of the created intent.
        """
        pass
