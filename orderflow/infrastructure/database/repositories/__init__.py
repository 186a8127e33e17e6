from .sqlalchemy_order_repository import SqlAlchemyOrderRepository

__all__ = ["SqlAlchemyOrderRepository"]
