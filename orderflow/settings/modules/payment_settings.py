from __future__ import annotations

from pydantic import Field

from orderflow.settings.base import OrderflowBaseSettings


class PaymentSettings(OrderflowBaseSettings):
    """
    Payment settings (Stripe adapter).
    Loaded from .env file with exact variable name matching.
    """

    currency: str = Field("usd", min_length=3, max_length=3, alias="ORDERFLOW_PAYMENT_CURRENCY")
