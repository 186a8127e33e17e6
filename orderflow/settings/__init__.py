# Settings package
from orderflow.settings.modules import (
    AdapterProfile,
    AdapterSettings,
    AppSettings,
    DatabaseSettings,
    LoggingSettings,
    NotificationSettings,
    PaymentSettings,
    get_app_settings,
)

__all__ = [
    "AdapterProfile",
    "AdapterSettings",
    "AppSettings",
    "DatabaseSettings",
    "LoggingSettings",
    "NotificationSettings",
    "PaymentSettings",
    "get_app_settings",
]
