"""
Stripe payment gateway.
Creates PaymentIntents through the Stripe SDK.
"""

import logging
from typing import List, Optional

import stripe
from starlette.concurrency import run_in_threadpool

from app.config import Settings, get_settings
from app.domain.services.payment_gateway import PaymentGateway

logger = logging.getLogger(__name__)


class StripePaymentGateway(PaymentGateway):
    """Stripe implementation of the payment gateway."""

    def __init__(self, settings: Optional[Settings] = None, client: Optional[stripe.StripeClient] = None):
        self.settings = settings or get_settings()
        self._client = client

    @property
    def client(self) -> stripe.StripeClient:
        """Stripe client, created on first use so the app starts without a key."""
        if self._client is None:
            self._client = stripe.StripeClient(self.settings.payment_secret_key or "")
        return self._client

    async def create_payment_intent(
        self,
        amount: int,
        currency: str,
        payment_method_types: List[str]
    ) -> str:
        """
        Create a PaymentIntent and return its client secret.
        The SDK call blocks, so it runs in the threadpool.
        """
        intent = await run_in_threadpool(
            self.client.payment_intents.create,
            params={
                "amount": amount,
                "currency": currency,
                "payment_method_types": payment_method_types,
            },
        )
        logger.info(f"Created payment intent {intent.id} for {amount} {currency}")
        return intent.client_secret


_gateway: Optional[StripePaymentGateway] = None


def get_payment_gateway() -> PaymentGateway:
    """Dependency to get the payment gateway."""
    global _gateway
    if _gateway is None:
        _gateway = StripePaymentGateway()
    return _gateway
