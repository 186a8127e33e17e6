"""Application-level enums."""
from enum import Enum


class AdapterOwnership(str, Enum):
    """Who is responsible for closing the adapters wired into a service."""

    # The service owns its adapters and closes them when it is closed.
    EXCLUSIVE = "exclusive"
    # The caller owns the adapters; they may be shared and outlive the service.
    BORROWED = "borrowed"
