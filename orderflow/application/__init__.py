"""Application layer - services, interfaces, and DTOs."""

from .dtos import LineItemDTO, OrderDTO, PlaceOrderRequest
from .enums import AdapterOwnership
from .interfaces import Notifier, PaymentGateway, Sender
from .services import (
    DynamicOrderService,
    IdentifierSequence,
    OrderPorts,
    OrderService,
    ServiceClosed,
)

__all__ = [
    # DTOs
    "LineItemDTO",
    "OrderDTO",
    "PlaceOrderRequest",
    # Services
    "AdapterOwnership",
    "DynamicOrderService",
    "IdentifierSequence",
    "OrderPorts",
    "OrderService",
    "ServiceClosed",
    # Interfaces
    "Notifier",
    "PaymentGateway",
    "Sender",
]
