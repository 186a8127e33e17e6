"""Static mappers for domain entities <-> database models."""

from orderflow.domain.entities import LineItem, Order
from orderflow.domain.value_objects import Money, OrderId

from .models import LineItemModel, OrderModel


class LineItemMapper:
    """Static mapper for LineItem <-> LineItemModel transformation."""

    @staticmethod
    def to_domain(model: LineItemModel) -> LineItem:
        return LineItem(name=model.name, price=Money(model.price_cents))

    @staticmethod
    def to_persistence(entity: LineItem, position: int) -> LineItemModel:
        """Convert domain value to ORM model.

        Args:
            entity: LineItem value
            position: Index of the item within its order

        Returns:
            LineItemModel instance
        """
        return LineItemModel(
            position=position,
            name=entity.name,
            price_cents=entity.price.cents,
        )


class OrderMapper:
    """Static mapper for Order <-> OrderModel transformation with nested items."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain entity (with nested items).

        The Order constructor re-checks the stored total against the items.

        Args:
            model: OrderModel instance

        Returns:
            Order domain entity
        """
        items = [LineItemMapper.to_domain(item_model) for item_model in model.items]

        return Order(
            id=OrderId(model.id),
            items=tuple(items),
            total=Money(model.total_cents),
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain entity to ORM model (with nested items)."""
        model = OrderModel(id=entity.id.value)
        OrderMapper.update_persistence(entity, model)
        return model

    @staticmethod
    def update_persistence(entity: Order, model: OrderModel) -> None:
        """Overwrite an existing ORM model with the entity state.

        Replaced items are removed by the delete-orphan cascade.
        """
        model.total_cents = entity.total.cents
        model.items = [
            LineItemMapper.to_persistence(item, position)
            for position, item in enumerate(entity.items)
        ]
