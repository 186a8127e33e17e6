"""orderflow - order placement across pluggable persistence, payment and notification ports."""

__version__ = "0.1.0"
