"""Menu catalog and category pricing."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from restaurant.config import BEVERAGE_SURCHARGE_RATE
from restaurant.errors import InvalidSelectionError
from restaurant.models import Category, MenuItem


def price_for(category: Category, price: Decimal, quantity: int) -> Decimal:
    """Charge for `quantity` units at `price` under the category's rule."""
    if category is Category.BEVERAGE:
        return price * quantity * BEVERAGE_SURCHARGE_RATE
    return price * quantity


class MenuCatalog:
    """Fixed, ordered menu addressed by 1-based position."""

    def __init__(self, items: Iterable[MenuItem]) -> None:
        self._items = tuple(items)

    @property
    def items(self) -> tuple[MenuItem, ...]:
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def get(self, position: int) -> MenuItem:
        """Return the item shown at `position` (1-based)."""
        if not (1 <= position <= len(self._items)):
            raise InvalidSelectionError(
                f"Invalid item number {position}; choose 1-{len(self._items)}"
            )
        return self._items[position - 1]

    def price_for(self, item: MenuItem, quantity: int) -> Decimal:
        return price_for(item.category, item.price, quantity)
