"""
Domain exceptions.

One exception per failing collaborator. They describe business failures,
not technical ones: adapters translate driver or HTTP errors into these
before they reach the application layer.
"""
from typing import Optional


class OrderError(Exception):
    """Base class for every order workflow failure."""

    default_code = "ORDER_ERROR"

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        """
        Initialize the error.

        Args:
            message: Human readable description
            code: Stable identifier for programmatic handling
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidOrder(OrderError):
    """Raised when an order would be built without any line item."""

    default_code = "INVALID_ORDER"


class PaymentFailed(OrderError):
    """Raised when the payment gateway rejects a charge."""

    default_code = "PAYMENT_FAILED"


class StorageFailed(OrderError):
    """Raised when the repository cannot save or load an order."""

    default_code = "STORAGE_FAILED"


class NotificationFailed(OrderError):
    """Raised when the notifier cannot deliver an order confirmation."""

    default_code = "NOTIFICATION_FAILED"


__all__ = [
    "OrderError",
    "InvalidOrder",
    "PaymentFailed",
    "StorageFailed",
    "NotificationFailed",
]
