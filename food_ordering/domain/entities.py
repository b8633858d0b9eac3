"""
Domain entities for food ordering.

Core business objects representing clients, orders and deliveries.
These entities are framework-agnostic and contain only business logic.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import List, Optional


def as_utc(value: datetime) -> datetime:
    # Naive timestamps are stored as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class FoodOrderStatus(str, Enum):
    """Lifecycle states of a food order."""

    PLACED = "PLACED"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True)
class UserIdentity:
    """
    Authentication identity of a registered user.

    Holds no credentials; the password is only ever forwarded to the
    account registry during registration.
    """

    username: str
    email: str
    enabled: bool = True


@dataclass(frozen=True)
class Client:
    """Registered client profile linked to an authentication identity."""

    full_name: str
    phone_number: str
    user: UserIdentity
    client_id: Optional[int] = None

    @property
    def username(self) -> str:
        return self.user.username


@dataclass(frozen=True)
class Delivery:
    """
    Value object for a delivery destination.

    The rendered address is derived from the address fields every time it is
    read, so it can never drift from them.
    """

    street_name: str
    house_number: str
    postal_code: str
    city: str
    apartment_number: Optional[str] = None
    delivery_notes: Optional[str] = None

    @property
    def delivery_address(self) -> str:
        """
        Render the address as a single line.

        Format: "{street} {house}, Apt. {apartment}, {postal} {city}, {notes}".
        The apartment segment and the notes segment are left out when empty.
        """
        parts = [f"{self.street_name} {self.house_number}"]
        if _has_text(self.apartment_number):
            parts.append(f"Apt. {self.apartment_number}")
        parts.append(f"{self.postal_code} {self.city}")
        if _has_text(self.delivery_notes):
            parts.append(self.delivery_notes)
        return ", ".join(parts)


def _has_text(value: Optional[str]) -> bool:
    return bool(value and value.strip())


@dataclass(frozen=True)
class OrderItem:
    """Single menu position within an order."""

    menu_item_name: str
    unit_price: Decimal
    quantity: int = 1

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass
class FoodOrder:
    """
    A placed food order.

    Orders are never deleted; the status is only moved forward by the
    order lifecycle guard.
    """

    unique_food_number: str
    order_time: datetime
    username: str
    status: FoodOrderStatus = FoodOrderStatus.PLACED
    items: List[OrderItem] = field(default_factory=list)
    delivery: Optional[Delivery] = None
    food_order_id: Optional[int] = None

    @property
    def total_price(self) -> Decimal:
        return sum((item.line_total for item in self.items), Decimal("0"))

    @property
    def is_cancelled(self) -> bool:
        return self.status == FoodOrderStatus.CANCELLED


@dataclass
class ClientOrderHistory:
    """All orders of one client, newest first."""

    username: str
    orders: List[FoodOrder] = field(default_factory=list)

    def __post_init__(self):
        self.orders = sorted(self.orders, key=lambda o: as_utc(o.order_time), reverse=True)
