"""Domain value objects - pure Python immutable types."""

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class OrderId:
    """
    Strongly-typed order identifier.

    Wraps a plain integer so an order id can never be mixed up with a
    quantity or an amount. Two ids are equal when their values are.
    """

    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"OrderId value must be an int, got: {self.value!r}")

    def __str__(self) -> str:
        return f"#{self.value}"


@dataclass(frozen=True)
class Money:
    """
    Immutable monetary value stored in cents.

    CRITICAL: Always an integer count of minor units, never a float!
    """

    cents: int

    def __post_init__(self):
        if isinstance(self.cents, bool) or not isinstance(self.cents, int):
            raise TypeError(f"Money must be an integer number of cents, got: {self.cents!r}")
        if self.cents < 0:
            raise ValueError(f"Money cannot be negative, got: {self.cents}")

    def __str__(self) -> str:
        return f"${self.cents // 100}.{self.cents % 100:02d}"

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.cents + other.cents)

    @classmethod
    def zero(cls) -> "Money":
        return cls(0)

    @classmethod
    def sum(cls, amounts: Iterable["Money"]) -> "Money":
        """Sum an iterable of Money objects (empty iterable gives zero)."""
        total = cls.zero()
        for amount in amounts:
            total = total + amount
        return total
