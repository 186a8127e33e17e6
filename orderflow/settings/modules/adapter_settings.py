from __future__ import annotations

from enum import Enum

from pydantic import Field

from orderflow.application.enums import AdapterOwnership
from orderflow.settings.base import OrderflowBaseSettings


class AdapterProfile(str, Enum):
    """Named adapter combinations known to the composition root."""

    IN_MEMORY = "in_memory"
    EXTERNAL = "external"


class AdapterSettings(OrderflowBaseSettings):
    """
    Adapter selection.
    Loaded from .env file with exact variable name matching.
    """

    profile: AdapterProfile = Field(AdapterProfile.IN_MEMORY, alias="ORDERFLOW_ADAPTER_PROFILE")
    ownership: AdapterOwnership = Field(
        AdapterOwnership.EXCLUSIVE, alias="ORDERFLOW_ADAPTER_OWNERSHIP"
    )
