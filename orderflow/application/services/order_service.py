"""
Application service for placing orders.

Flow of ``place_order``:
1. Allocate the next OrderId (always, even if validation then fails)
2. Build the Order entity (business rule: at least one item)
3. Charge the payment gateway
4. Save through the repository
5. Send the confirmation

The first failing step raises and nothing after it runs. There is no
compensation: a charge stays taken when saving fails, and a saved order
stays saved when the notification fails.
"""
from dataclasses import dataclass
from typing import Generic, Iterable, List, Optional, TypeVar, Union
import logging
import threading

from orderflow.application.enums import AdapterOwnership
from orderflow.application.interfaces import Notifier, PaymentGateway
from orderflow.domain.entities import LineItem, Order
from orderflow.domain.exceptions import OrderError
from orderflow.domain.repositories import OrderRepository
from orderflow.domain.value_objects import OrderId


logger = logging.getLogger(__name__)

R = TypeVar("R", bound=OrderRepository)
P = TypeVar("P", bound=PaymentGateway)
N = TypeVar("N", bound=Notifier)


class ServiceClosed(RuntimeError):
    """Raised when a closed OrderService is used again."""

    code = "SERVICE_CLOSED"


class IdentifierSequence:
    """
    Monotonic OrderId generator.

    Guarded by a lock so a service shared between threads never hands
    out the same id twice.
    """

    def __init__(self, start: int = 1) -> None:
        self._next = start
        self._lock = threading.Lock()

    def peek(self) -> int:
        """Value the next allocation will return."""
        with self._lock:
            return self._next

    def allocate(self) -> OrderId:
        with self._lock:
            value = self._next
            self._next += 1
        return OrderId(value)


@dataclass(frozen=True)
class OrderPorts:
    """One implementation of each port the workflow needs."""

    repository: OrderRepository
    payment: PaymentGateway
    notifier: Notifier


def _as_order_id(order_id: Union[OrderId, int]) -> OrderId:
    if isinstance(order_id, OrderId):
        return order_id
    return OrderId(order_id)


class _OrderWorkflow:
    """Identifier sequence plus the place-order steps, shared by both services."""

    def __init__(self) -> None:
        self._ids = IdentifierSequence()

    @property
    def next_id(self) -> OrderId:
        """Identifier the next ``place_order`` call will consume."""
        return OrderId(self._ids.peek())

    def _place_order(self, items: Iterable[LineItem], ports: OrderPorts) -> Order:
        order_id = self._ids.allocate()
        logger.info(f"[{order_id}] Placing order")

        try:
            order = Order.create(order_id, items)

            logger.info(f"[{order_id}] Step 1: Charging {order.total}")
            ports.payment.charge(order.total)

            logger.info(f"[{order_id}] Step 2: Saving order ({len(order.items)} item(s))")
            ports.repository.save(order)

            logger.info(f"[{order_id}] Step 3: Sending confirmation")
            ports.notifier.send(order)
        except OrderError as e:
            logger.warning(f"[{order_id}] Order placement failed: {e}")
            raise

        logger.info(f"[{order_id}] Order placed, total {order.total}")
        return order

    @staticmethod
    def _find(order_id: Union[OrderId, int], repository: OrderRepository) -> Optional[Order]:
        return repository.find(_as_order_id(order_id))


class OrderService(_OrderWorkflow, Generic[R, P, N]):
    """
    Order service bound to one adapter per port at construction time.

    The adapter combination is fixed for the lifetime of the service.
    ``ownership`` states who closes the adapters:

    - ``EXCLUSIVE`` (default): ``close()`` closes every adapter exposing a
      ``close()`` method. Do not share the adapters with another service.
    - ``BORROWED``: the caller keeps ownership. Adapters can be shared by
      several services and stay usable after this one is closed.
    """

    def __init__(
        self,
        repository: R,
        payment: P,
        notifier: N,
        ownership: AdapterOwnership = AdapterOwnership.EXCLUSIVE,
    ) -> None:
        """
        Initialize the service.

        Args:
            repository: OrderRepository implementation
            payment: PaymentGateway implementation
            notifier: Notifier implementation
            ownership: Whether the service owns or borrows the adapters
        """
        super().__init__()
        self._repository = repository
        self._payment = payment
        self._notifier = notifier
        self._ownership = AdapterOwnership(ownership)
        self._closed = False

    @classmethod
    def from_ports(
        cls,
        ports: OrderPorts,
        ownership: AdapterOwnership = AdapterOwnership.EXCLUSIVE,
    ) -> "OrderService":
        return cls(ports.repository, ports.payment, ports.notifier, ownership=ownership)

    @property
    def repository(self) -> R:
        return self._repository

    @property
    def payment(self) -> P:
        return self._payment

    @property
    def notifier(self) -> N:
        return self._notifier

    @property
    def ownership(self) -> AdapterOwnership:
        return self._ownership

    @property
    def closed(self) -> bool:
        return self._closed

    def place_order(self, items: Iterable[LineItem]) -> Order:
        """
        Place an order.

        Args:
            items: Line items of the order

        Returns:
            The placed Order

        Raises:
            InvalidOrder: ``items`` is empty (no port is called)
            PaymentFailed: The charge was rejected (nothing saved or sent)
            StorageFailed: Saving failed (the charge is not reversed)
            NotificationFailed: Sending failed (charge and save stand)
            ServiceClosed: The service was closed
        """
        self._ensure_open()
        ports = OrderPorts(self._repository, self._payment, self._notifier)
        return self._place_order(items, ports)

    def get_order(self, order_id: Union[OrderId, int]) -> Optional[Order]:
        """
        Get a previously placed order.

        Args:
            order_id: OrderId (a plain int is accepted)

        Returns:
            Order if found, None otherwise

        Raises:
            StorageFailed: The repository could not be queried
        """
        self._ensure_open()
        return self._find(order_id, self._repository)

    def close(self) -> None:
        """Close the service, and its adapters when it owns them.

        Every owned adapter is closed even if an earlier one fails; the
        first failure is re-raised once all of them have been tried.
        """
        if self._closed:
            return
        self._closed = True

        if self._ownership is not AdapterOwnership.EXCLUSIVE:
            return

        first_error: Optional[BaseException] = None
        for adapter in self._distinct_adapters():
            close = getattr(adapter, "close", None)
            if not callable(close):
                continue
            logger.debug(f"Closing {type(adapter).__name__}")
            try:
                close()
            except Exception as e:
                logger.error(f"Failed to close {type(adapter).__name__}: {e}", exc_info=True)
                if first_error is None:
                    first_error = e

        if first_error is not None:
            raise first_error

    def __enter__(self) -> "OrderService[R, P, N]":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _distinct_adapters(self) -> List[object]:
        adapters: List[object] = []
        for adapter in (self._repository, self._payment, self._notifier):
            if not any(adapter is seen for seen in adapters):
                adapters.append(adapter)
        return adapters

    def _ensure_open(self) -> None:
        if self._closed:
            raise ServiceClosed("OrderService is closed")


class DynamicOrderService(_OrderWorkflow):
    """
    Order service resolving its adapters on every call.

    Holds only the identifier sequence. Callers pass the adapters with
    each call, so they can be swapped between calls without building a
    new service. The adapters always stay owned by the caller.
    """

    def place_order(self, items: Iterable[LineItem], ports: OrderPorts) -> Order:
        """
        Place an order through the given ports.

        Args:
            items: Line items of the order
            ports: Adapters to use for this call

        Returns:
            The placed Order

        Raises:
            OrderError: The first failing step's error, see OrderService.place_order
        """
        return self._place_order(items, ports)

    def get_order(
        self,
        order_id: Union[OrderId, int],
        repository: OrderRepository,
    ) -> Optional[Order]:
        return self._find(order_id, repository)
