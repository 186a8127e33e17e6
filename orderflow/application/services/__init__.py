"""Application services."""
from .order_service import (
    DynamicOrderService,
    IdentifierSequence,
    OrderPorts,
    OrderService,
    ServiceClosed,
)

__all__ = [
    "DynamicOrderService",
    "IdentifierSequence",
    "OrderPorts",
    "OrderService",
    "ServiceClosed",
]
