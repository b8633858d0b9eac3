"""
Test configuration and fixtures
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from food_ordering.domain.entities import (
    Client,
    Delivery,
    FoodOrder,
    FoodOrderStatus,
    OrderItem,
    UserIdentity,
)
from food_ordering.repositories import (
    IAccountRegistry,
    IFoodOrderRepository,
    IPrincipalProvider,
)

FIXED_NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    """Fixed point in time used as the current time."""
    return FIXED_NOW


@pytest.fixture
def registration_params():
    """Registration parameters as posted by the registration page."""
    return {
        "user.username": "testUser",
        "user.password": "testPass",
        "user.email": "test@example.com",
        "user.enabled": "true",
        "fullName": "Test User",
        "phoneNumber": "1234567890",
    }


@pytest.fixture
def address_params():
    """Delivery address parameters as posted by the address page."""
    return {
        "streetName": "Main Street",
        "houseNumber": "123",
        "apartmentNumber": "42",
        "postalCode": "10000",
        "city": "TestCity",
        "deliveryNotes": "Leave at door",
    }


@pytest.fixture
def identity():
    return UserIdentity(username="testUser", email="test@example.com")


@pytest.fixture
def client(identity):
    return Client(full_name="Test User", phone_number="1234567890", user=identity, client_id=1)


@pytest.fixture
def delivery():
    return Delivery(
        street_name="Main Street",
        house_number="123",
        apartment_number="42",
        postal_code="10000",
        city="TestCity",
        delivery_notes="Leave at door",
    )


@pytest.fixture
def order_items():
    return (
        OrderItem(menu_item_name="Margherita", unit_price=Decimal("24.50"), quantity=2),
        OrderItem(menu_item_name="Lemonade", unit_price=Decimal("6.00"), quantity=1),
    )


@pytest.fixture
def make_order(now, delivery, order_items):
    """Factory for orders placed a given number of seconds before now."""

    def _make_order(
        seconds_ago: int = 600,
        status: FoodOrderStatus = FoodOrderStatus.PLACED,
        order_id: int = 1,
    ) -> FoodOrder:
        return FoodOrder(
            unique_food_number="FO-ABC123",
            order_time=now - timedelta(seconds=seconds_ago),
            username="testUser",
            status=status,
            items=list(order_items),
            delivery=delivery,
            food_order_id=order_id,
        )

    return _make_order


@pytest.fixture
def account_registry():
    """Mock account registry."""
    return MagicMock(spec=IAccountRegistry)


@pytest.fixture
def order_repository():
    """Mock order repository."""
    return MagicMock(spec=IFoodOrderRepository)


@pytest.fixture
def principal_provider():
    """Mock authentication layer."""
    return MagicMock(spec=IPrincipalProvider)
