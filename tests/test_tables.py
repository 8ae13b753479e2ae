from decimal import Decimal

import pytest

from restaurant.data import seed_tables
from restaurant.errors import AlreadyBookedError, TableNotFoundError, TableUnavailableError
from restaurant.models import Table
from restaurant.tables import TableRegistry


@pytest.fixture
def registry():
    return TableRegistry(seed_tables())


def test_list_keeps_seed_order_and_starts_available(registry):
    tables = registry.list()
    assert [table.number for table in tables] == [1, 2, 3]
    assert not any(table.is_booked for table in tables)


def test_find_by_number(registry):
    assert registry.find_by_number(2).capacity == 6
    assert registry.find_by_number(99) is None


def test_book_marks_table_booked_and_is_visible_in_list(registry):
    registry.book(registry.find_by_number(1))
    assert registry.find_by_number(1).is_booked
    assert [table.booked for table in registry.list()] == [True, False, False]


def test_booking_twice_fails(registry):
    registry.book_number(1)
    with pytest.raises(AlreadyBookedError, match="already booked") as excinfo:
        registry.book_number(1)
    assert excinfo.value.table_number == 1


def test_book_unknown_number(registry):
    with pytest.raises(TableNotFoundError):
        registry.book_number(7)


def test_table_errors_share_a_base():
    assert issubclass(AlreadyBookedError, TableUnavailableError)
    assert issubclass(TableNotFoundError, TableUnavailableError)


def test_duplicate_table_numbers_rejected():
    with pytest.raises(ValueError):
        TableRegistry([Table(1, 2, Decimal("10")), Table(1, 4, Decimal("20"))])


def test_seed_tables_are_fresh_per_call():
    first = seed_tables()
    first[0].booked = True
    assert not seed_tables()[0].booked
