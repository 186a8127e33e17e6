"""Tests for the mock and simulated external adapters."""
import logging
from concurrent.futures import ThreadPoolExecutor

from orderflow.domain import LineItem, Money, Order, OrderId
from orderflow.infrastructure.adapters.notifications import ConsoleNotifier, SendGridNotifier
from orderflow.infrastructure.adapters.payment import MockPaymentGateway, StripePaymentGateway
from orderflow.settings import NotificationSettings, PaymentSettings


def _order() -> Order:
    return Order.create(
        OrderId(1),
        [LineItem("Rust Book", Money(4999)), LineItem("Keyboard", Money(12999))],
    )


def test_mock_payment_records_charges():
    gateway = MockPaymentGateway()

    gateway.charge(Money(100))
    gateway.charge(Money(250))

    assert gateway.charges == [Money(100), Money(250)]


def test_stripe_payload_uses_cents_and_configured_currency():
    gateway = StripePaymentGateway(PaymentSettings(ORDERFLOW_PAYMENT_CURRENCY="EUR"))

    gateway.charge(Money(17998))

    assert gateway.payment_intents == [{"amount": 17998, "currency": "eur", "confirm": True}]


def test_console_notifier_logs_confirmation(caplog):
    with caplog.at_level(logging.INFO, logger="orderflow"):
        ConsoleNotifier().send(_order())

    assert "[Console] Order #1 confirmed, total $179.98" in caplog.text


def test_sendgrid_payload():
    settings = NotificationSettings(
        ORDERFLOW_NOTIFY_FROM_ADDRESS="shop@example.com",
        ORDERFLOW_NOTIFY_TO_ADDRESS="buyer@example.com",
        ORDERFLOW_NOTIFY_PREFIX="[shop]",
    )
    notifier = SendGridNotifier(settings)

    notifier.send(_order())

    [payload] = notifier.outbox
    assert payload["from"] == {"email": "shop@example.com"}
    assert payload["personalizations"] == [{"to": [{"email": "buyer@example.com"}]}]
    assert payload["subject"] == "[shop] Order #1 confirmed"
    body = payload["content"][0]["value"]
    assert "- Rust Book: $49.99" in body
    assert body.endswith("Total: $179.98")


def test_recording_adapters_keep_every_call_under_threads():
    mock_gateway = MockPaymentGateway()
    stripe_gateway = StripePaymentGateway()
    notifier = SendGridNotifier()
    order = _order()

    def place(_):
        mock_gateway.charge(Money(100))
        stripe_gateway.charge(Money(100))
        notifier.send(order)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(place, range(200)))

    assert len(mock_gateway.charges) == 200
    assert len(stripe_gateway.payment_intents) == 200
    assert len(notifier.outbox) == 200
