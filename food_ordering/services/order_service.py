"""
Food order service layer.

Places orders from a checkout, looks up order summaries and loads a
client's order history.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional, Tuple
from uuid import uuid4

from ..config import settings
from ..domain.entities import (
    ClientOrderHistory,
    Delivery,
    FoodOrder,
    FoodOrderStatus,
    OrderItem,
)
from ..domain.exceptions import (
    OrderHistoryUnavailableException,
    OrderProcessingException,
    ValidationException,
)
from ..logging_config import get_logger
from ..repositories.client_repository import IAccountRegistry
from ..repositories.order_repository import IFoodOrderRepository
from .order_lifecycle_service import utc_now

logger = get_logger(__name__)


@dataclass(frozen=True)
class Checkout:
    """Everything collected from the client before an order is placed."""

    username: Optional[str]
    delivery: Optional[Delivery]
    items: Tuple[OrderItem, ...] = field(default_factory=tuple)


class FoodOrderService:
    """Order placement and retrieval."""

    def __init__(
        self,
        order_repository: IFoodOrderRepository,
        account_registry: IAccountRegistry,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.order_repository = order_repository
        self.account_registry = account_registry
        self.clock = clock

    def generate_unique_food_number(self) -> str:
        return f"{settings.UNIQUE_FOOD_NUMBER_PREFIX}-{uuid4().hex[:12].upper()}"

    def process_order(self, checkout: Checkout) -> str:
        """
        Place an order for the checkout.

        Args:
            checkout: Client, delivery and selected items

        Returns:
            Unique food number of the placed order

        Raises:
            OrderProcessingException: If the checkout is incomplete
            ValidationException: If an item has a non-positive quantity
        """
        if not checkout.username:
            raise OrderProcessingException("No authenticated client")
        if checkout.delivery is None:
            raise OrderProcessingException("No delivery address provided")
        if not checkout.items:
            raise OrderProcessingException("No items selected")
        for item in checkout.items:
            if item.quantity <= 0:
                raise ValidationException(
                    "quantity", item.quantity, f"must be positive for {item.menu_item_name}"
                )

        order = FoodOrder(
            unique_food_number=self.generate_unique_food_number(),
            order_time=self.clock(),
            username=checkout.username,
            status=FoodOrderStatus.PLACED,
            items=list(checkout.items),
            delivery=checkout.delivery,
        )
        saved = self.order_repository.save_order(order)
        logger.info(
            "order_placed",
            unique_food_number=saved.unique_food_number,
            username=saved.username,
            item_count=len(saved.items),
            total_price=str(saved.total_price),
        )
        return saved.unique_food_number

    def show_order_summary(self, unique_food_number: str) -> Optional[FoodOrder]:
        """Return the order with its items, or None if unknown."""
        return self.order_repository.find_by_unique_food_number(unique_food_number)

    def get_client_order_history(self, username: str) -> ClientOrderHistory:
        """
        Load the order history of a client.

        Raises:
            OrderHistoryUnavailableException: If the registry fails
        """
        try:
            return self.account_registry.get_client_order_history(username)
        except Exception as e:
            raise OrderHistoryUnavailableException(username, str(e)) from e
