"""
Composition root.

The only module that names concrete adapters. Everything else depends on
the port interfaces.
"""
from typing import Optional
import logging

from orderflow.application.enums import AdapterOwnership
from orderflow.application.services import DynamicOrderService, OrderPorts, OrderService
from orderflow.infrastructure.adapters.notifications import ConsoleNotifier, SendGridNotifier
from orderflow.infrastructure.adapters.payment import MockPaymentGateway, StripePaymentGateway
from orderflow.infrastructure.adapters.persistence import InMemoryOrderRepository
from orderflow.infrastructure.database import SqlAlchemyOrderRepository
from orderflow.settings import AdapterProfile, AppSettings, get_app_settings


logger = logging.getLogger(__name__)


def build_adapters(
    profile: AdapterProfile,
    settings: Optional[AppSettings] = None,
) -> OrderPorts:
    """
    Build one adapter per port for the given profile.

    - ``in_memory``: dictionary repository, mock payment, console notifier
    - ``external``: SQLAlchemy repository, Stripe payment, SendGrid notifier
      (payment and e-mail are simulated)

    Args:
        profile: Adapter combination to build
        settings: Application settings (defaults to ``get_app_settings()``)

    Returns:
        OrderPorts bundle
    """
    settings = settings or get_app_settings()
    profile = AdapterProfile(profile)
    logger.info(f"Building adapters for profile '{profile.value}'")

    if profile is AdapterProfile.IN_MEMORY:
        return OrderPorts(
            repository=InMemoryOrderRepository(),
            payment=MockPaymentGateway(),
            notifier=ConsoleNotifier(),
        )

    return OrderPorts(
        repository=SqlAlchemyOrderRepository.from_settings(settings.database),
        payment=StripePaymentGateway(settings.payment),
        notifier=SendGridNotifier(settings.notifications),
    )


def create_order_service(
    settings: Optional[AppSettings] = None,
    ports: Optional[OrderPorts] = None,
    ownership: Optional[AdapterOwnership] = None,
) -> OrderService:
    """
    Create a statically bound OrderService.

    Args:
        settings: Application settings (defaults to ``get_app_settings()``)
        ports: Adapters to bind; built from the configured profile when omitted
        ownership: Overrides the configured ownership mode

    Returns:
        OrderService bound to the adapters
    """
    settings = settings or get_app_settings()
    if ports is None:
        ports = build_adapters(settings.adapters.profile, settings)
    ownership = ownership or settings.adapters.ownership

    logger.info(f"Creating OrderService (ownership: {AdapterOwnership(ownership).value})")
    return OrderService.from_ports(ports, ownership=ownership)


def create_dynamic_order_service() -> DynamicOrderService:
    return DynamicOrderService()


__all__ = ["build_adapters", "create_order_service", "create_dynamic_order_service"]
