"""
Outcome variants returned by the food ordering services.

Each operation returns exactly one variant of a closed set instead of
raising. Callers branch with isinstance checks.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .entities import Client

DUPLICATE_IDENTITY_MESSAGE = "Username or email already exists."
REGISTRATION_FAILED_MESSAGE = "Registration failed."
ORDER_CANCELLED_MESSAGE = "Order has been cancelled successfully."
ORDER_ALREADY_CANCELLED_MESSAGE = "Order has already been cancelled."
ORDER_NOT_FOUND_MESSAGE = "Order not found."


def window_expired_message(window_minutes: int) -> str:
    return f"Order cannot be cancelled after {window_minutes} minutes."


# Results reported by the account registry


@dataclass(frozen=True)
class AccountRegistered:
    """The registry created the account and the client profile."""

    client: Client


@dataclass(frozen=True)
class IdentityConflict:
    """The username or email is already taken."""

    field: str


@dataclass(frozen=True)
class RegistrationError:
    """The registry could not create the account for any other reason."""

    reason: str


RegistrationResult = Union[AccountRegistered, IdentityConflict, RegistrationError]


# Registration outcomes


@dataclass(frozen=True)
class RegistrationSucceeded:
    client: Client
    message: Optional[str] = None


@dataclass(frozen=True)
class RegistrationDuplicate:
    message: str = DUPLICATE_IDENTITY_MESSAGE


@dataclass(frozen=True)
class RegistrationFailed:
    message: str = REGISTRATION_FAILED_MESSAGE


RegistrationOutcome = Union[RegistrationSucceeded, RegistrationDuplicate, RegistrationFailed]


# Cancellation outcomes


class RejectionReason(str, Enum):
    """Why a cancellation request was turned down."""

    WINDOW_EXPIRED = "window_expired"
    ALREADY_CANCELLED = "already_cancelled"


@dataclass(frozen=True)
class OrderCancelled:
    order_id: int
    message: str = ORDER_CANCELLED_MESSAGE


@dataclass(frozen=True)
class CancellationRejected:
    order_id: int
    message: str
    reason: RejectionReason


@dataclass(frozen=True)
class CancellationNotFound:
    order_id: int
    message: str = ORDER_NOT_FOUND_MESSAGE


CancellationOutcome = Union[OrderCancelled, CancellationRejected, CancellationNotFound]
