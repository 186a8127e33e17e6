"""
Mock Payment Gateway Implementation.

Always accepts the charge. Useful for testing the happy path and demos.
"""
from typing import List
import logging
import threading

from orderflow.application.interfaces import PaymentGateway
from orderflow.domain.value_objects import Money


logger = logging.getLogger(__name__)


class MockPaymentGateway(PaymentGateway):
    """Mock implementation of PaymentGateway that records every charge."""

    def __init__(self):
        self.charges: List[Money] = []
        self._lock = threading.Lock()

    def charge(self, amount: Money) -> None:
        with self._lock:
            self.charges.append(amount)
        logger.info(f"[MockPayment] Charging {amount}")
