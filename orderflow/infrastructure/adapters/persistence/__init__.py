"""Persistence adapters.

The SQLAlchemy repository lives in ``orderflow.infrastructure.database``.
"""
from .in_memory_order_repository import InMemoryOrderRepository

__all__ = ["InMemoryOrderRepository"]
