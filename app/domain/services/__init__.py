"""
Domain services for the rental marketplace.
"""

from .role_resolver import RoleResolver
from .payment_gateway import PaymentGateway

__all__ = [
    "RoleResolver",
    "PaymentGateway",
]
