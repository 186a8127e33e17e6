"""
In-Memory Notifier Implementation.

Keeps the confirmation messages instead of sending them.
"""
from typing import List
import logging
import threading

from orderflow.application.interfaces import Notifier
from orderflow.domain.entities import Order


logger = logging.getLogger(__name__)


class InMemoryNotifier(Notifier):
    """
    Notifier that records one message per order.

    Useful for testing and demos; read the messages back with ``messages()``.
    """

    def __init__(self):
        self._messages: List[str] = []
        self._lock = threading.Lock()

    def send(self, order: Order) -> None:
        message = f"Order {order.id} stored, total = {order.total}"
        with self._lock:
            self._messages.append(message)
        logger.debug(f"[Memory] {message}")

    def messages(self) -> List[str]:
        """Get a copy of the recorded messages."""
        with self._lock:
            return list(self._messages)

    def clear(self) -> None:
        """Clear messages (for testing)."""
        with self._lock:
            self._messages.clear()
