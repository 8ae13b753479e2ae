"""Domain models for the restaurant simulator."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from restaurant.constant import DEFAULT_TASK, EVENT_LABELS
from restaurant.errors import InvalidQuantityError


class Category(str, Enum):
    """Pricing category of a menu item."""

    FOOD = "food"
    BEVERAGE = "beverage"


class Role(str, Enum):
    COOK = "cook"
    WAITER = "waiter"
    SWEEPER = "sweeper"
    OTHER = "other"

    @classmethod
    def from_label(cls, label: str) -> Role:
        """Parse a role label case-insensitively, falling back to OTHER."""
        try:
            return cls(label.strip().lower())
        except ValueError:
            return cls.OTHER

    @property
    def label(self) -> str:
        return self.value.title()


class EventType(str, Enum):
    BIRTHDAY_PARTY = "birthday_party"
    ANNIVERSARY = "anniversary"
    NO_EVENT = "no_event"

    @property
    def label(self) -> str:
        return EVENT_LABELS[self.value]


@dataclass(frozen=True)
class MenuItem:
    """A purchasable menu entry."""

    name: str
    price: Decimal
    category: Category

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"price must be >= 0, got {self.price}")


@dataclass
class Table:
    """A seating table; booking is one-way for the lifetime of a session."""

    number: int
    capacity: int
    cost_per_meal: Decimal
    booked: bool = False

    @property
    def is_booked(self) -> bool:
        return self.booked


@dataclass
class Staff:
    name: str
    role: Role
    task: str = DEFAULT_TASK


@dataclass(frozen=True)
class OrderLine:
    """One menu item selection with its quantity."""

    item: MenuItem
    quantity: int

    def __post_init__(self) -> None:
        if self.quantity <= 0:
            raise InvalidQuantityError(self.quantity)


@dataclass(frozen=True)
class BillLine:
    name: str
    quantity: int
    price: Decimal


@dataclass(frozen=True)
class Bill:
    """Derived totals over a set of order lines."""

    lines: list[BillLine] = field(default_factory=list)
    subtotal: Decimal = Decimal("0")
    tax: Decimal = Decimal("0")

    @property
    def total(self) -> Decimal:
        return self.subtotal + self.tax


@dataclass(frozen=True)
class PaymentRecord:
    method: str
    amount: Decimal
