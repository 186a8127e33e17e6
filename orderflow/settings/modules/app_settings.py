from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

from orderflow.settings.modules.adapter_settings import AdapterSettings
from orderflow.settings.modules.database_settings import DatabaseSettings
from orderflow.settings.modules.logging_settings import LoggingSettings
from orderflow.settings.modules.notification_settings import NotificationSettings
from orderflow.settings.modules.payment_settings import PaymentSettings


class AppSettings(BaseModel):
    """Application settings aggregator."""

    model_config = ConfigDict(extra="ignore")

    adapters: AdapterSettings = Field(default_factory=AdapterSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    notifications: NotificationSettings = Field(default_factory=NotificationSettings)
    payment: PaymentSettings = Field(default_factory=PaymentSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache()
def get_app_settings() -> AppSettings:
    return AppSettings(
        adapters=AdapterSettings(),
        database=DatabaseSettings(),
        notifications=NotificationSettings(),
        payment=PaymentSettings(),
        logging=LoggingSettings(),
    )
