"""
Repository layer - Data access abstractions.

This layer provides the interfaces of the account registry, the order store
and the identity provider, hiding implementation details from the business
logic.
"""

from .client_repository import IAccountRegistry, IPrincipalProvider
from .order_repository import IFoodOrderRepository

__all__ = [
    "IAccountRegistry",
    "IFoodOrderRepository",
    "IPrincipalProvider",
]
