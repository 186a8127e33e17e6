"""
In-Memory Order Repository Implementation.

Dictionary-backed storage for tests and demos.
"""
from typing import Dict, List, Optional
import logging
import threading

from orderflow.domain.entities import Order
from orderflow.domain.repositories import OrderRepository
from orderflow.domain.value_objects import OrderId


logger = logging.getLogger(__name__)


class InMemoryOrderRepository(OrderRepository):
    """
    In-memory implementation of OrderRepository.

    Orders are immutable, so storing the instance is as good as a copy.
    """

    def __init__(self, name: str = "InMemory"):
        """
        Initialize empty storage.

        Args:
            name: Label used in log lines
        """
        self.name = name
        self._storage: Dict[OrderId, Order] = {}
        self._lock = threading.Lock()
        logger.info(f"{type(self).__name__} initialized ({name})")

    def save(self, order: Order) -> None:
        with self._lock:
            self._storage[order.id] = order
        logger.info(f"[{self.name}] Saving order {order.id}")

    def find(self, order_id: OrderId) -> Optional[Order]:
        logger.info(f"[{self.name}] Finding order {order_id}")
        with self._lock:
            return self._storage.get(order_id)

    def get_all(self) -> List[Order]:
        """Get all orders, in insertion order (for demo/testing)."""
        with self._lock:
            return list(self._storage.values())

    def clear(self) -> None:
        """Clear all orders (for demo/testing)."""
        with self._lock:
            self._storage.clear()
        logger.info(f"[{self.name}] Repository cleared")

    def __len__(self) -> int:
        with self._lock:
            return len(self._storage)
