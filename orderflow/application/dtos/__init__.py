"""Application DTOs."""

from .order_dto import LineItemDTO, OrderDTO, PlaceOrderRequest

__all__ = ["LineItemDTO", "OrderDTO", "PlaceOrderRequest"]
