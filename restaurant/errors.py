"""Exceptions raised by the ordering domain."""

from __future__ import annotations


class RestaurantError(Exception):
    """Base class for all ordering errors shown to the user."""


class InvalidQuantityError(RestaurantError):
    """An order line was requested with a non-positive quantity."""

    def __init__(self, quantity: int) -> None:
        super().__init__("Quantity must be greater than 0")
        self.quantity = quantity


class InvalidPaymentMethodError(RestaurantError):
    """The payment method is not one of the accepted methods."""

    def __init__(self, method: str, accepted: list[str]) -> None:
        super().__init__(f"Invalid payment method! Available: {', '.join(accepted)}")
        self.method = method
        self.accepted = accepted


class InvalidSelectionError(RestaurantError):
    """A numbered choice was not an integer or fell outside the offered range."""


class TableUnavailableError(RestaurantError):
    """The requested table cannot be booked."""

    def __init__(self, message: str, table_number: int) -> None:
        super().__init__(message)
        self.table_number = table_number


class TableNotFoundError(TableUnavailableError):
    def __init__(self, table_number: int) -> None:
        super().__init__(f"Table {table_number} does not exist", table_number)


class AlreadyBookedError(TableUnavailableError):
    def __init__(self, table_number: int) -> None:
        super().__init__(f"Table {table_number} is already booked", table_number)
