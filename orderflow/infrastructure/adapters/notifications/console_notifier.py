"""Console notifier: writes the confirmation to the log."""
import logging

from orderflow.application.interfaces import Notifier
from orderflow.domain.entities import Order


logger = logging.getLogger(__name__)


class ConsoleNotifier(Notifier):
    def send(self, order: Order) -> None:
        logger.info(f"[Console] Order {order.id} confirmed, total {order.total}")
