from __future__ import annotations

from pydantic import Field

from orderflow.settings.base import OrderflowBaseSettings


class NotificationSettings(OrderflowBaseSettings):
    """
    Notification settings (SendGrid adapter).
    Loaded from .env file with exact variable name matching.
    """

    from_address: str = Field("orders@example.com", alias="ORDERFLOW_NOTIFY_FROM_ADDRESS")
    to_address: str = Field("customer@example.com", alias="ORDERFLOW_NOTIFY_TO_ADDRESS")
    prefix: str = Field("[orderflow]", alias="ORDERFLOW_NOTIFY_PREFIX")
