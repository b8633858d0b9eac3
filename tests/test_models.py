"""
Tests for models.py (Pydantic form models).

Tests validation rules, aliases, required fields, and optional fields.
"""

import pytest
from pydantic import ValidationError

from food_ordering.models import DeliveryAddressForm, RegistrationForm


class TestRegistrationForm:
    """Test RegistrationForm model validation."""

    def test_from_dotted_params(self, registration_params):
        """Test parameters posted by the registration page."""
        form = RegistrationForm.from_params(registration_params)
        assert form.username == "testUser"
        assert form.email == "test@example.com"
        assert form.enabled is True
        assert form.full_name == "Test User"
        assert form.phone_number == "1234567890"

    def test_password_is_secret(self, registration_params):
        """Test password is not exposed in repr."""
        form = RegistrationForm.from_params(registration_params)
        assert "testPass" not in repr(form)
        assert form.password.get_secret_value() == "testPass"

    def test_field_names_accepted(self):
        """Test plain field names populate the form."""
        form = RegistrationForm(
            username="u",
            password="p",
            email="u@example.com",
            full_name="U",
            phone_number="1",
        )
        assert form.enabled is True

    def test_invalid_email(self, registration_params):
        """Test invalid email format."""
        registration_params["user.email"] = "not-an-email"
        with pytest.raises(ValidationError) as exc_info:
            RegistrationForm.from_params(registration_params)
        assert "email" in str(exc_info.value).lower()

    def test_missing_full_name(self, registration_params):
        """Test missing full name."""
        del registration_params["fullName"]
        with pytest.raises(ValidationError):
            RegistrationForm.from_params(registration_params)

    def test_to_client(self, registration_params):
        """Test conversion into a Client linked to its identity."""
        client = RegistrationForm.from_params(registration_params).to_client()
        assert client.username == "testUser"
        assert client.user.email == "test@example.com"
        assert client.client_id is None


class TestDeliveryAddressForm:
    """Test DeliveryAddressForm model validation."""

    def test_valid_form(self, address_params):
        """Test valid address data."""
        form = DeliveryAddressForm.model_validate(address_params)
        assert form.street_name == "Main Street"
        assert form.apartment_number == "42"
        assert form.delivery_notes == "Leave at door"

    def test_optional_fields(self, address_params):
        """Test apartment and notes may be omitted."""
        del address_params["apartmentNumber"]
        del address_params["deliveryNotes"]
        form = DeliveryAddressForm.model_validate(address_params)
        assert form.apartment_number is None
        assert form.delivery_notes is None

    def test_whitespace_stripped(self, address_params):
        """Test surrounding whitespace is removed."""
        address_params["city"] = "  TestCity  "
        form = DeliveryAddressForm.model_validate(address_params)
        assert form.city == "TestCity"

    @pytest.mark.parametrize("field", ["streetName", "houseNumber", "postalCode", "city"])
    def test_required_fields(self, address_params, field):
        """Test required fields cannot be blank."""
        address_params[field] = "  "
        with pytest.raises(ValidationError):
            DeliveryAddressForm.model_validate(address_params)
