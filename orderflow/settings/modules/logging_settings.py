from __future__ import annotations

from pydantic import Field

from orderflow.settings.base import OrderflowBaseSettings


class LoggingSettings(OrderflowBaseSettings):
    level: str = Field("INFO", alias="ORDERFLOW_LOG_LEVEL")
