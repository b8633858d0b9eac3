"""
Service layer - Business logic orchestration.

Services combine the domain rules with the repository interfaces.
"""

from .delivery_service import build_delivery, format_delivery_address
from .order_lifecycle_service import OrderLifecycleGuard
from .order_service import Checkout, FoodOrderService
from .registration_service import ClientRegistrationService

__all__ = [
    "Checkout",
    "ClientRegistrationService",
    "FoodOrderService",
    "OrderLifecycleGuard",
    "build_delivery",
    "format_delivery_address",
]
