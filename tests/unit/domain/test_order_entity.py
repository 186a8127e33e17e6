"""Tests for the Order entity and its construction rules."""
import pytest

from orderflow.domain import InvalidOrder, LineItem, Money, Order, OrderError, OrderId


def test_create_sums_item_prices(items):
    order = Order.create(OrderId(1), items)

    assert order.id == OrderId(1)
    assert order.total == Money(17998)
    assert order.items == tuple(items)


def test_create_keeps_item_order():
    items = [LineItem(f"item-{i}", Money(i)) for i in range(10)]

    order = Order.create(OrderId(3), items)

    assert [item.name for item in order.items] == [f"item-{i}" for i in range(10)]
    assert order.total == Money(45)


def test_create_accepts_any_iterable(items):
    order = Order.create(OrderId(1), iter(items))

    assert len(order.items) == 2


def test_create_without_items_raises_invalid_order():
    with pytest.raises(InvalidOrder) as exc_info:
        Order.create(OrderId(5), [])

    assert exc_info.value.code == "INVALID_ORDER"
    assert isinstance(exc_info.value, OrderError)


def test_direct_construction_checks_total(items):
    with pytest.raises(InvalidOrder) as exc_info:
        Order(id=OrderId(1), items=tuple(items), total=Money(1))

    assert "Total mismatch" in exc_info.value.message
    assert isinstance(exc_info.value, OrderError)


def test_direct_construction_without_items_raises():
    with pytest.raises(InvalidOrder):
        Order(id=OrderId(1), items=(), total=Money(0))


def test_order_is_immutable(items):
    order = Order.create(OrderId(1), items)

    with pytest.raises(AttributeError):
        order.total = Money(0)
    assert isinstance(order.items, tuple)


def test_caller_list_mutation_does_not_leak(items):
    order = Order.create(OrderId(1), items)
    items.append(LineItem("Mouse", Money(2500)))

    assert len(order.items) == 2
    assert order.total == Money(17998)


def test_line_item_is_immutable():
    item = LineItem("Book", Money(4999))

    with pytest.raises(AttributeError):
        item.name = "Other"
