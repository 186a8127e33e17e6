"""Tests for the in-memory repository and notifier."""
from orderflow.domain import LineItem, Money, Order, OrderId
from orderflow.infrastructure.adapters.notifications import InMemoryNotifier
from orderflow.infrastructure.adapters.persistence import InMemoryOrderRepository


def _order(order_id: int) -> Order:
    return Order.create(OrderId(order_id), [LineItem("Book", Money(4999))])


class TestInMemoryOrderRepository:
    def test_find_unknown_returns_none(self):
        assert InMemoryOrderRepository().find(OrderId(99)) is None

    def test_save_then_find(self):
        repository = InMemoryOrderRepository()
        order = _order(1)

        repository.save(order)

        assert repository.find(OrderId(1)) == order
        assert len(repository) == 1

    def test_save_same_id_overwrites(self):
        repository = InMemoryOrderRepository()
        repository.save(_order(1))
        replacement = Order.create(OrderId(1), [LineItem("Pen", Money(150))])

        repository.save(replacement)

        assert repository.find(OrderId(1)) == replacement
        assert len(repository) == 1

    def test_get_all_and_clear(self):
        repository = InMemoryOrderRepository()
        repository.save(_order(1))
        repository.save(_order(2))

        assert [order.id for order in repository.get_all()] == [OrderId(1), OrderId(2)]

        repository.clear()
        assert len(repository) == 0


class TestInMemoryNotifier:
    def test_records_one_message_per_order(self):
        notifier = InMemoryNotifier()

        notifier.send(_order(1))
        notifier.send(_order(2))

        assert notifier.messages() == [
            "Order #1 stored, total = $49.99",
            "Order #2 stored, total = $49.99",
        ]

    def test_messages_returns_a_copy(self):
        notifier = InMemoryNotifier()
        notifier.send(_order(1))

        notifier.messages().clear()

        assert len(notifier.messages()) == 1

    def test_clear(self):
        notifier = InMemoryNotifier()
        notifier.send(_order(1))

        notifier.clear()

        assert notifier.messages() == []
