"""
Custom exceptions for the food ordering domain.

These exceptions represent domain-level errors and are independent
of infrastructure concerns (HTTP, database, etc.). Business rule
rejections such as an expired cancellation window are not exceptions;
they are returned as outcomes (see outcomes.py).
"""

from typing import Any, Optional


class FoodOrderingException(Exception):
    """Base exception for all food ordering errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class OrderProcessingException(FoodOrderingException):
    """Raised when a checkout cannot be turned into an order."""

    def __init__(self, reason: str):
        super().__init__(message=reason, details={"reason": reason})


class OrderHistoryUnavailableException(FoodOrderingException):
    """Raised when a client's order history cannot be retrieved."""

    def __init__(self, username: str, reason: Optional[str] = None):
        message = f"Order history unavailable for {username}"
        if reason:
            message += f": {reason}"
        super().__init__(
            message=message, details={"username": username, "reason": reason}
        )


class ValidationException(FoodOrderingException):
    """Raised when input validation fails."""

    def __init__(self, field: str, value: Any, reason: str):
        message = f"Validation failed for {field}: {reason}"
        super().__init__(
            message=message,
            details={"field": field, "value": str(value), "reason": reason},
        )
