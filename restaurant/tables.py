"""Seating tables and booking."""

from __future__ import annotations

import logging
from typing import Iterable

from restaurant.errors import AlreadyBookedError, TableNotFoundError
from restaurant.models import Table

logger = logging.getLogger(__name__)


class TableRegistry:
    """Ordered set of tables owned by one session."""

    def __init__(self, tables: Iterable[Table]) -> None:
        self._tables: list[Table] = list(tables)
        numbers = [table.number for table in self._tables]
        if len(set(numbers)) != len(numbers):
            raise ValueError(f"table numbers must be unique: {numbers}")

    def list(self) -> list[Table]:
        return list(self._tables)

    def find_by_number(self, number: int) -> Table | None:
        for table in self._tables:
            if table.number == number:
                return table
        return None

    def book(self, table: Table) -> Table:
        if table.booked:
            raise AlreadyBookedError(table.number)
        table.booked = True
        logger.debug("table_booked number=%s capacity=%s", table.number, table.capacity)
        return table

    def book_number(self, number: int) -> Table:
        """Look up a table by number and book it."""
        table = self.find_by_number(number)
        if table is None:
            raise TableNotFoundError(number)
        return self.book(table)
