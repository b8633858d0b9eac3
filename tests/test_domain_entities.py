"""
Unit tests for domain entities.

Tests for Delivery, OrderItem, FoodOrder, ClientOrderHistory and as_utc.
"""

import dataclasses
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from food_ordering.domain.entities import (
    ClientOrderHistory,
    Delivery,
    FoodOrderStatus,
    OrderItem,
    as_utc,
)


class TestDelivery:
    """Tests for Delivery value object."""

    def test_full_address(self, delivery):
        """Test address with apartment and notes."""
        assert delivery.delivery_address == "Main Street 123, Apt. 42, 10000 TestCity, Leave at door"

    def test_address_follows_fields(self, delivery):
        """Test derived address tracks a changed field."""
        moved = dataclasses.replace(delivery, city="OtherCity")
        assert moved.delivery_address == "Main Street 123, Apt. 42, 10000 OtherCity, Leave at door"

    def test_address_not_settable(self, delivery):
        """Test the rendered address cannot be assigned."""
        with pytest.raises(AttributeError):
            delivery.delivery_address = "Somewhere else"

    def test_whitespace_apartment_is_absent(self):
        """Test whitespace-only apartment number is left out."""
        delivery = Delivery("Main Street", "123", "10000", "TestCity", apartment_number="  ")
        assert delivery.delivery_address == "Main Street 123, 10000 TestCity"


class TestOrderItem:
    """Tests for OrderItem."""

    def test_line_total(self):
        """Test line total is price times quantity."""
        item = OrderItem(menu_item_name="Soup", unit_price=Decimal("7.25"), quantity=3)
        assert item.line_total == Decimal("21.75")


class TestFoodOrder:
    """Tests for FoodOrder entity."""

    def test_defaults_to_placed(self, make_order):
        """Test new orders are PLACED."""
        order = make_order()
        assert order.status == FoodOrderStatus.PLACED
        assert not order.is_cancelled

    def test_total_price(self, make_order):
        """Test total is the sum of line totals."""
        assert make_order().total_price == Decimal("55.00")

    def test_cancelled_flag(self, make_order):
        """Test is_cancelled for a CANCELLED order."""
        assert make_order(status=FoodOrderStatus.CANCELLED).is_cancelled

    def test_status_values(self):
        """Test only PLACED and CANCELLED exist."""
        assert {s.value for s in FoodOrderStatus} == {"PLACED", "CANCELLED"}


class TestClientOrderHistory:
    """Tests for ClientOrderHistory."""

    def test_orders_sorted_newest_first(self, make_order):
        """Test orders are ordered by placement time, newest first."""
        older = make_order(seconds_ago=3600, order_id=1)
        newer = make_order(seconds_ago=60, order_id=2)
        history = ClientOrderHistory(username="testUser", orders=[older, newer])
        assert [o.food_order_id for o in history.orders] == [2, 1]

    def test_mixed_naive_and_aware_times(self, make_order):
        """Test naive times sort as UTC next to aware ones."""
        stored = make_order(order_id=1)
        stored.order_time = datetime(2024, 5, 1, 11, 50, 0)
        placed = make_order(order_id=2)
        placed.order_time = datetime(2024, 5, 1, 11, 55, 0, tzinfo=timezone.utc)
        history = ClientOrderHistory(username="testUser", orders=[stored, placed])
        assert [o.food_order_id for o in history.orders] == [2, 1]

    def test_naive_time_newer_than_aware(self, make_order):
        """Test a newer naive time comes first."""
        aware = make_order(order_id=1)
        aware.order_time = datetime(2024, 5, 1, 11, 50, 0, tzinfo=timezone.utc)
        naive = make_order(order_id=2)
        naive.order_time = datetime(2024, 5, 1, 11, 55, 0)
        history = ClientOrderHistory(username="testUser", orders=[aware, naive])
        assert [o.food_order_id for o in history.orders] == [2, 1]

    def test_empty_history(self):
        """Test history without orders."""
        history = ClientOrderHistory(username="testUser")
        assert history.orders == []


class TestAsUtc:
    """Tests for as_utc."""

    def test_naive_gets_utc(self):
        """Test naive time is read as UTC."""
        assert as_utc(datetime(2024, 5, 1, 12, 0)).tzinfo == timezone.utc

    def test_aware_unchanged(self):
        """Test aware time keeps its offset."""
        value = datetime(2024, 5, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
        assert as_utc(value) is value
