"""Application layer interfaces."""
from abc import ABC, abstractmethod

from orderflow.domain.entities import Order
from orderflow.domain.value_objects import Money


class PaymentGateway(ABC):
    """
    Interface for payment processing.

    A charge is all-or-nothing: either the full amount is taken or the
    call raises. No partial charges and no state the caller must track.
    """

    @abstractmethod
    def charge(self, amount: Money) -> None:
        """
        Charge the customer.

        Args:
            amount: Amount to charge, in cents

        Raises:
            PaymentFailed: If the charge was rejected
        """


class Notifier(ABC):
    """
    Interface for order confirmation notifications.

    Implementations may log, email, post to chat, etc. A notification is
    sent once; retries are not part of the contract.
    """

    @abstractmethod
    def send(self, order: Order) -> None:
        """
        Send an order confirmation.

        Args:
            order: The order that was placed

        Raises:
            NotificationFailed: If the notification could not be delivered
        """


# Older name of the notification port
Sender = Notifier


__all__ = ["PaymentGateway", "Notifier", "Sender"]
