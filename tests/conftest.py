"""Shared fixtures: recording fakes for the three ports."""

from typing import List, Optional

import pytest

from orderflow.application.interfaces import Notifier, PaymentGateway
from orderflow.domain import (
    LineItem,
    Money,
    NotificationFailed,
    Order,
    OrderId,
    OrderRepository,
    PaymentFailed,
    StorageFailed,
)
from orderflow.settings import get_app_settings


class FakeOrderRepository(OrderRepository):
    """Fake repository recording calls into a shared call log."""

    def __init__(self, call_log: List[str]) -> None:
        self.call_log = call_log
        self.orders: dict = {}
        self.saved: List[Order] = []
        self.fail = False
        self.closed = False

    def save(self, order: Order) -> None:
        self.call_log.append("save")
        if self.fail:
            raise StorageFailed("disk full")
        self.saved.append(order)
        self.orders[order.id] = order

    def find(self, order_id: OrderId) -> Optional[Order]:
        self.call_log.append("find")
        if self.fail:
            raise StorageFailed("connection lost")
        return self.orders.get(order_id)

    def close(self) -> None:
        self.closed = True


class FakePaymentGateway(PaymentGateway):
    """Fake payment gateway recording charged amounts."""

    def __init__(self, call_log: List[str]) -> None:
        self.call_log = call_log
        self.charges: List[Money] = []
        self.fail = False
        self.closed = False

    def charge(self, amount: Money) -> None:
        self.call_log.append("charge")
        if self.fail:
            raise PaymentFailed("card declined")
        self.charges.append(amount)

    def close(self) -> None:
        self.closed = True


class FakeNotifier(Notifier):
    """Fake notifier recording sent orders."""

    def __init__(self, call_log: List[str]) -> None:
        self.call_log = call_log
        self.sent: List[Order] = []
        self.fail = False

    def send(self, order: Order) -> None:
        self.call_log.append("send")
        if self.fail:
            raise NotificationFailed("smtp unreachable")
        self.sent.append(order)


@pytest.fixture
def call_log() -> List[str]:
    return []


@pytest.fixture
def repository(call_log) -> FakeOrderRepository:
    return FakeOrderRepository(call_log)


@pytest.fixture
def payment(call_log) -> FakePaymentGateway:
    return FakePaymentGateway(call_log)


@pytest.fixture
def notifier(call_log) -> FakeNotifier:
    return FakeNotifier(call_log)


@pytest.fixture
def items() -> List[LineItem]:
    return [
        LineItem(name="Book", price=Money(4999)),
        LineItem(name="Keyboard", price=Money(12999)),
    ]


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; tests changing env need a fresh read."""
    get_app_settings.cache_clear()
    yield
    get_app_settings.cache_clear()


@pytest.fixture(autouse=True)
def isolated_working_directory(tmp_path, monkeypatch):
    """Settings read ``.env`` from the working directory; run tests from an empty one."""
    monkeypatch.chdir(tmp_path)
    yield tmp_path
