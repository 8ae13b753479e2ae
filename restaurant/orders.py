"""Order ledger and bill calculation."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable

from restaurant.config import TAX_RATE
from restaurant.menu import MenuCatalog
from restaurant.models import Bill, BillLine, MenuItem, OrderLine

logger = logging.getLogger(__name__)


class OrderLedger:
    """Collects a session's order lines and prices them against the catalog."""

    def __init__(self, catalog: MenuCatalog) -> None:
        self.catalog = catalog
        self._lines: list[OrderLine] = []

    @property
    def lines(self) -> list[OrderLine]:
        return list(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def add_order(self, item: MenuItem, quantity: int) -> OrderLine:
        """Record a new line; raises InvalidQuantityError for quantity <= 0."""
        line = OrderLine(item=item, quantity=quantity)
        self._lines.append(line)
        logger.debug("order_added item=%s quantity=%d", item.name, quantity)
        return line

    def total(self, line: OrderLine) -> Decimal:
        return self.catalog.price_for(line.item, line.quantity)

    def generate_bill(self, lines: Iterable[OrderLine] | None = None) -> Bill:
        """Price each line, then derive subtotal, tax and total."""
        source = self._lines if lines is None else list(lines)
        bill_lines = [BillLine(line.item.name, line.quantity, self.total(line)) for line in source]
        subtotal = sum((line.price for line in bill_lines), Decimal("0"))
        return Bill(lines=bill_lines, subtotal=subtotal, tax=subtotal * TAX_RATE)
