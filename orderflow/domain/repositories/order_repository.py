"""Repository interface for the Order entity."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.order import Order
from ..value_objects import OrderId


class OrderRepository(ABC):
    """Abstract repository for Order persistence."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist an order.

        Args:
            order: Order to persist. Implementations may keep a copy.

        Raises:
            StorageFailed: If the order could not be stored
        """

    @abstractmethod
    def find(self, order_id: OrderId) -> Optional[Order]:
        """Retrieve an order by identifier.

        Args:
            order_id: OrderId identifier

        Returns:
            Order if found, None otherwise (an unknown id is not an error)

        Raises:
            StorageFailed: If the storage could not be queried
        """
