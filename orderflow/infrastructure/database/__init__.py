"""SQLAlchemy persistence: models, mappers, engine and repository."""
from .config import create_engine_from_settings, is_in_memory_sqlite
from .mappers import LineItemMapper, OrderMapper
from .models import Base, LineItemModel, OrderModel
from .repositories import SqlAlchemyOrderRepository

__all__ = [
    "Base",
    "LineItemMapper",
    "LineItemModel",
    "OrderMapper",
    "OrderModel",
    "SqlAlchemyOrderRepository",
    "create_engine_from_settings",
    "is_in_memory_sqlite",
]
