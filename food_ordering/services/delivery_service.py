"""Delivery address formatting."""

from typing import Optional

from ..domain.entities import Delivery
from ..models import DeliveryAddressForm


def format_delivery_address(
    street_name: str,
    house_number: str,
    apartment_number: Optional[str],
    postal_code: str,
    city: str,
    delivery_notes: Optional[str] = None,
) -> str:
    """
    Render address fields as a single delivery line.

    >>> format_delivery_address("Main Street", "123", "42", "10000", "TestCity", "Leave at door")
    'Main Street 123, Apt. 42, 10000 TestCity, Leave at door'
    >>> format_delivery_address("Main Street", "123", "", "10000", "TestCity", "")
    'Main Street 123, 10000 TestCity'
    """
    return Delivery(
        street_name=street_name,
        house_number=house_number,
        apartment_number=apartment_number,
        postal_code=postal_code,
        city=city,
        delivery_notes=delivery_notes,
    ).delivery_address


def build_delivery(form: DeliveryAddressForm) -> Delivery:
    """Turn a validated address form into a Delivery value."""
    return Delivery(
        street_name=form.street_name,
        house_number=form.house_number,
        apartment_number=form.apartment_number or None,
        postal_code=form.postal_code,
        city=form.city,
        delivery_notes=form.delivery_notes or None,
    )
