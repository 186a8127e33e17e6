"""
Order entity.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
"""
from dataclasses import dataclass
from typing import Iterable, Tuple

from ..exceptions import InvalidOrder
from ..value_objects import Money, OrderId


@dataclass(frozen=True)
class LineItem:
    """Individual line item within an order."""

    name: str
    price: Money


@dataclass(frozen=True)
class Order:
    """
    Order entity: identifier, line items and their total.

    Business rules:
    - An order contains at least one line item.
    - The total is the sum of the item prices. It is computed once by
      ``create`` and never mutated afterwards.

    Direct construction (e.g. a repository rebuilding a stored order) is
    checked against the same rules.
    """

    id: OrderId
    items: Tuple[LineItem, ...]
    total: Money

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))
        if not self.items:
            raise InvalidOrder(f"Order {self.id} must contain at least one item")

        expected = Money.sum(item.price for item in self.items)
        if expected != self.total:
            raise InvalidOrder(f"Total mismatch for order {self.id}: {self.total} vs {expected}")

    @classmethod
    def create(cls, order_id: OrderId, items: Iterable[LineItem]) -> "Order":
        """
        Factory method for a new Order.

        Args:
            order_id: Identifier allocated by the application service
            items: Line items, in order

        Returns:
            New Order whose total is the exact sum of the item prices

        Raises:
            InvalidOrder: If ``items`` is empty
        """
        items = tuple(items)
        if not items:
            raise InvalidOrder(f"Order {order_id} must contain at least one item")

        total = Money.sum(item.price for item in items)
        return cls(id=order_id, items=items, total=total)
