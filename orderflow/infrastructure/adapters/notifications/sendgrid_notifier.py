"""
SendGrid Notifier Implementation (simulated).

Builds the mail/send payload SendGrid expects and records it instead of
posting it.
"""
from typing import Any, Dict, List, Optional
import logging
import threading

from orderflow.application.interfaces import Notifier
from orderflow.domain.entities import Order
from orderflow.settings.modules.notification_settings import NotificationSettings


logger = logging.getLogger(__name__)


class SendGridNotifier(Notifier):
    """
    Simulated SendGrid implementation of Notifier.

    Sends an order confirmation e-mail.
    """

    def __init__(self, settings: Optional[NotificationSettings] = None):
        """
        Initialize SendGrid notifier.

        Args:
            settings: Sender/recipient addresses and subject prefix
        """
        self.settings = settings or NotificationSettings()
        self.outbox: List[Dict[str, Any]] = []
        self._lock = threading.Lock()
        logger.info("SendGridNotifier initialized (simulated)")

    def send(self, order: Order) -> None:
        payload = self._build_payload(order)
        with self._lock:
            self.outbox.append(payload)
        logger.info(f"[SendGrid] Sending confirmation for order {order.id}")

    def _build_payload(self, order: Order) -> Dict[str, Any]:
        lines = [f"- {item.name}: {item.price}" for item in order.items]
        body = "\n".join(
            [f"Thank you for your order {order.id}.", *lines, f"Total: {order.total}"]
        )
        return {
            "personalizations": [{"to": [{"email": self.settings.to_address}]}],
            "from": {"email": self.settings.from_address},
            "subject": f"{self.settings.prefix} Order {order.id} confirmed",
            "content": [{"type": "text/plain", "value": body}],
        }
