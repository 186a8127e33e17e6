"""Notification adapters."""
from .console_notifier import ConsoleNotifier
from .in_memory_notifier import InMemoryNotifier
from .sendgrid_notifier import SendGridNotifier

__all__ = ["ConsoleNotifier", "InMemoryNotifier", "SendGridNotifier"]
