"""SQLAlchemy implementation of OrderRepository."""

from typing import Optional
import logging
import threading

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from orderflow.domain.entities import Order
from orderflow.domain.exceptions import InvalidOrder, StorageFailed
from orderflow.domain.repositories import OrderRepository
from orderflow.domain.value_objects import OrderId
from orderflow.settings.modules.database_settings import DatabaseSettings

from ..config import create_engine_from_settings
from ..mappers import OrderMapper
from ..models import Base, OrderModel


logger = logging.getLogger(__name__)


class SqlAlchemyOrderRepository(OrderRepository):
    """
    Concrete implementation of OrderRepository using SQLAlchemy.

    Each call runs in its own session. Driver errors surface as
    StorageFailed with the original error chained.
    """

    def __init__(self, engine: Engine, create_schema: bool = True) -> None:
        """Initialize repository.

        Args:
            engine: SQLAlchemy engine
            create_schema: Create the tables if they do not exist
        """
        self._engine = engine
        self._session_factory = sessionmaker(bind=engine, expire_on_commit=False)
        self._lock = threading.Lock()
        if create_schema:
            Base.metadata.create_all(engine)

    @classmethod
    def from_settings(cls, settings: Optional[DatabaseSettings] = None) -> "SqlAlchemyOrderRepository":
        return cls(create_engine_from_settings(settings or DatabaseSettings()))

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def backend(self) -> str:
        """Dialect name of the engine, e.g. "sqlite" or "postgresql"."""
        return self._engine.dialect.name

    def save(self, order: Order) -> None:
        """Insert the order, or overwrite the stored one with the same id.

        Args:
            order: Order entity

        Raises:
            StorageFailed: On any database error
        """
        try:
            with self._lock, self._session_factory.begin() as session:
                existing = session.get(OrderModel, order.id.value)
                if existing is not None:
                    action = "update"
                    OrderMapper.update_persistence(order, existing)
                else:
                    action = "insert"
                    session.add(OrderMapper.to_persistence(order))
        except SQLAlchemyError as e:
            logger.error(f"Failed to save order {order.id}: {e}")
            raise StorageFailed(f"Could not save order {order.id}: {e}") from e

        logger.info(f"[{self.backend}] Saved order {order.id} ({action})")

    def find(self, order_id: OrderId) -> Optional[Order]:
        """Retrieve order by identifier.

        Args:
            order_id: OrderId identifier

        Returns:
            Order if found, None otherwise

        Raises:
            StorageFailed: On any database error, or if the stored row
                no longer forms a valid order
        """
        logger.info(f"[{self.backend}] Finding order {order_id}")
        try:
            with self._lock, self._session_factory() as session:
                model = session.get(OrderModel, order_id.value)
                if model is None:
                    return None
                return OrderMapper.to_domain(model)
        except (SQLAlchemyError, ValueError, InvalidOrder) as e:
            logger.error(f"Failed to load order {order_id}: {e}")
            raise StorageFailed(f"Could not load order {order_id}: {e}") from e

    def close(self) -> None:
        """Dispose of the engine's connection pool."""
        self._engine.dispose()
