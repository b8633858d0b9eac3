"""
Food order repository interface (Abstract Base Class).

Defines the contract for order persistence and retrieval
independent of the underlying storage mechanism.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..domain.entities import FoodOrder, FoodOrderStatus


class IFoodOrderRepository(ABC):
    """
    Abstract repository interface for food orders.

    Implementations are expected to apply single-row updates atomically.
    """

    @abstractmethod
    def find_order_by_id(self, order_id: int) -> Optional[FoodOrder]:
        """
        Find an order by its identifier.

        Returns:
            FoodOrder if found, None otherwise
        """
        pass

    @abstractmethod
    def find_by_unique_food_number(self, unique_food_number: str) -> Optional[FoodOrder]:
        """
        Find an order by its public order number.

        Returns:
            FoodOrder with items and delivery if found, None otherwise
        """
        pass

    @abstractmethod
    def update_order_status(self, order_id: int, status: FoodOrderStatus) -> None:
        """
        Persist a new status for an order.

        Args:
            order_id: Order identifier
            status: New status
        """
        pass

    @abstractmethod
    def save_order(self, order: FoodOrder) -> FoodOrder:
        """
        Persist a newly placed order.

        Returns:
            The saved order, with its identifier assigned
        """
        pass
