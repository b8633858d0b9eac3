"""
Pydantic models for form input.

Defines the raw input boundary objects of the client pages. They validate
what the user typed; turning them into domain values is left to the
services.
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, SecretStr

from .domain.entities import Client, UserIdentity


class RegistrationForm(BaseModel):
    """
    Model for client registration.

    Field aliases match the parameter names posted by the registration
    page ("user.username", "fullName", ...); plain field names are
    accepted as well.
    """

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    username: str = Field(..., alias="user.username", min_length=1, max_length=64)
    password: SecretStr = Field(..., alias="user.password")
    email: EmailStr = Field(..., alias="user.email")
    enabled: bool = Field(default=True, alias="user.enabled")
    full_name: str = Field(..., alias="fullName", min_length=1)
    phone_number: str = Field(..., alias="phoneNumber", min_length=1, max_length=32)

    @classmethod
    def from_params(cls, params: Dict[str, str]) -> "RegistrationForm":
        """Build the form from posted request parameters."""
        return cls.model_validate(params)

    def to_identity(self) -> UserIdentity:
        return UserIdentity(
            username=self.username, email=str(self.email), enabled=self.enabled
        )

    def to_client(self) -> Client:
        return Client(
            full_name=self.full_name,
            phone_number=self.phone_number,
            user=self.to_identity(),
        )


class DeliveryAddressForm(BaseModel):
    """Model for the delivery address page."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    street_name: str = Field(..., alias="streetName", min_length=1, max_length=128)
    house_number: str = Field(..., alias="houseNumber", min_length=1, max_length=16)
    apartment_number: Optional[str] = Field(
        default=None, alias="apartmentNumber", max_length=16
    )
    postal_code: str = Field(..., alias="postalCode", min_length=1, max_length=16)
    city: str = Field(..., min_length=1, max_length=64)
    delivery_notes: Optional[str] = Field(
        default=None, alias="deliveryNotes", max_length=512
    )
