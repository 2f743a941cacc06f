"""
Payment gateway infrastructure.
"""

from .stripe_gateway import StripePaymentGateway, get_payment_gateway

__all__ = [
    "StripePaymentGateway",
    "get_payment_gateway",
]
