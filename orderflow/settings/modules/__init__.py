from orderflow.settings.modules.adapter_settings import AdapterProfile, AdapterSettings
from orderflow.settings.modules.app_settings import AppSettings, get_app_settings
from orderflow.settings.modules.database_settings import DatabaseSettings
from orderflow.settings.modules.logging_settings import LoggingSettings
from orderflow.settings.modules.notification_settings import NotificationSettings
from orderflow.settings.modules.payment_settings import PaymentSettings

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
