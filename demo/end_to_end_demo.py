"""
End-to-End Demo: Placing Orders

Runs the same workflow against two adapter configurations:
1. In-memory adapters (dictionary repository, mock payment, console notifier)
2. "External" adapters (SQLAlchemy repository, Stripe, SendGrid - simulated)

Then shows the dynamic service swapping notifiers between calls and two
services sharing one borrowed repository.
"""
import json

from orderflow.application import (
    AdapterOwnership,
    OrderDTO,
    OrderPorts,
    PlaceOrderRequest,
)
from orderflow.composition import build_adapters, create_dynamic_order_service, create_order_service
from orderflow.domain import OrderError
from orderflow.infrastructure.adapters.notifications import ConsoleNotifier, InMemoryNotifier
from orderflow.infrastructure.adapters.payment import MockPaymentGateway
from orderflow.infrastructure.adapters.persistence import InMemoryOrderRepository
from orderflow.infrastructure.logging import get_logger
from orderflow.settings import AdapterProfile, get_app_settings


settings = get_app_settings()
logger = get_logger("demo", settings.logging.level)
get_logger("orderflow", settings.logging.level)

REQUEST = PlaceOrderRequest.model_validate(
    {
        "items": [
            {"name": "Rust Book", "price_cents": 4999},
            {"name": "Keyboard", "price_cents": 12999},
        ]
    }
)


def demo_configuration(profile: AdapterProfile) -> None:
    """Demo: place and retrieve one order with the given adapter profile."""
    print("\n" + "=" * 80)
    print(f"DEMO: {profile.value} configuration")
    print("=" * 80 + "\n")

    ports = build_adapters(profile, settings)
    with create_order_service(settings, ports=ports) as service:
        try:
            order = service.place_order(REQUEST.to_line_items())
        except OrderError as e:
            print(f"\n  Error: {e}\n")
            return

        print(f"\n  Success! Order {order.id} placed.\n")

        retrieved = service.get_order(order.id)
        if retrieved is not None:
            print(json.dumps(OrderDTO.from_order(retrieved).model_dump(), indent=2))


def demo_dynamic_binding() -> None:
    """Demo: one dynamic service, notifier swapped between calls."""
    print("\n" + "=" * 80)
    print("DEMO: dynamic binding")
    print("=" * 80 + "\n")

    service = create_dynamic_order_service()
    repository = InMemoryOrderRepository()
    payment = MockPaymentGateway()
    memory_notifier = InMemoryNotifier()

    service.place_order(REQUEST.to_line_items(), OrderPorts(repository, payment, ConsoleNotifier()))
    service.place_order(REQUEST.to_line_items(), OrderPorts(repository, payment, memory_notifier))

    for message in memory_notifier.messages():
        print(f"  [Memory] {message}")


def demo_borrowed_adapters() -> None:
    """Demo: two services sharing one repository they do not own."""
    print("\n" + "=" * 80)
    print("DEMO: borrowed adapters")
    print("=" * 80 + "\n")

    shared = OrderPorts(InMemoryOrderRepository(), MockPaymentGateway(), InMemoryNotifier())
    with create_order_service(settings, ports=shared, ownership=AdapterOwnership.BORROWED) as first:
        first.place_order(REQUEST.to_line_items())
    with create_order_service(settings, ports=shared, ownership=AdapterOwnership.BORROWED) as second:
        second.place_order(REQUEST.to_line_items())

    # Both services numbered their orders from 1, so the second save replaced the first
    print(f"  Orders in shared repository: {len(shared.repository)}")
    print(f"  Notifications recorded: {len(shared.notifier.messages())}")


def main() -> None:
    demo_configuration(AdapterProfile.IN_MEMORY)
    demo_configuration(AdapterProfile.EXTERNAL)
    demo_dynamic_binding()
    demo_borrowed_adapters()


if __name__ == "__main__":
    main()
