"""
Stripe Payment Gateway Implementation (simulated).

Builds the payload a Stripe PaymentIntent call would receive and records
it instead of calling the API.
"""
from typing import Any, Dict, List, Optional
import logging
import threading

from orderflow.application.interfaces import PaymentGateway
from orderflow.domain.value_objects import Money
from orderflow.settings.modules.payment_settings import PaymentSettings


logger = logging.getLogger(__name__)


class StripePaymentGateway(PaymentGateway):
    """
    Simulated Stripe implementation of PaymentGateway.

    Amounts are sent in the smallest currency unit, which is exactly what
    Money holds.
    """

    def __init__(self, settings: Optional[PaymentSettings] = None):
        """
        Initialize Stripe payment gateway.

        Args:
            settings: Payment settings (currency); defaults are used when omitted
        """
        self.settings = settings or PaymentSettings()
        self.currency = self.settings.currency.lower()
        self.payment_intents: List[Dict[str, Any]] = []
        self._lock = threading.Lock()
        logger.info("StripePaymentGateway initialized (simulated)")

    def charge(self, amount: Money) -> None:
        payload = {
            "amount": amount.cents,
            "currency": self.currency,
            "confirm": True,
        }
        with self._lock:
            self.payment_intents.append(payload)
        logger.info(f"[Stripe] Charging {amount} ({self.currency})")
