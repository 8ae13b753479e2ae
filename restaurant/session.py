"""Interactive ordering session driven by console prompts."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, TextIO

from rich.console import Console
from rich.prompt import Prompt

from restaurant.config import MANAGER_NAME, MAX_ORDER_LINES
from restaurant.constant import EVENT_CHOICES
from restaurant.data import MENU, seed_staff, seed_tables
from restaurant.errors import (
    InvalidPaymentMethodError,
    InvalidQuantityError,
    InvalidSelectionError,
    TableUnavailableError,
)
from restaurant.kitchen import KitchenHandler
from restaurant.manager import ManagerConsole
from restaurant.menu import MenuCatalog
from restaurant.models import Bill, EventType, MenuItem, Staff, Table
from restaurant.orders import OrderLedger
from restaurant.payment import PaymentProcessor
from restaurant.rendering import format_bill, format_menu_item, format_table
from restaurant.staff import StaffRoster
from restaurant.tables import TableRegistry

logger = logging.getLogger(__name__)


class SessionOutcome(str, Enum):
    """How a session terminated."""

    COMPLETED = "completed"
    INVALID_ROLE = "invalid_role"
    TABLE_UNAVAILABLE = "table_unavailable"
    STAFF_NOT_FOUND = "staff_not_found"


class Session:
    """
    One run from role selection to termination.

    Each role branch runs to completion and ends the session; there is no way
    back to role selection. Input is read line by line from `stream` (stdin
    when omitted) and everything is printed to `console`.
    """

    def __init__(
        self,
        console: Console | None = None,
        stream: TextIO | None = None,
        menu: Iterable[MenuItem] | None = None,
        tables: Iterable[Table] | None = None,
        staff: Iterable[Staff] | None = None,
        manager_name: str = MANAGER_NAME,
        max_order_lines: int = MAX_ORDER_LINES,
    ) -> None:
        self.console = console or Console()
        self.stream = stream
        self.max_order_lines = max_order_lines

        self.catalog = MenuCatalog(MENU if menu is None else menu)
        self.tables = TableRegistry(seed_tables() if tables is None else tables)
        self.manager = ManagerConsole(manager_name, StaffRoster(), self.console)
        for member in seed_staff() if staff is None else staff:
            self.manager.add_staff(member)
        self.manager.assign_tasks()

        self.kitchen = KitchenHandler(self.console)
        self.ledger = OrderLedger(self.catalog)
        self.payments = PaymentProcessor(self.console)

        self.booked_table: Table | None = None
        self.event = EventType.NO_EVENT

    def run(self) -> SessionOutcome:
        logger.debug("session_start")
        self.console.print("Welcome to Our Restaurant", style="bold")
        self.console.print("Select Role: 1-Customer, 2-Manager, 3-Staff")
        try:
            choice: int | None = self._ask_int("Role")
        except InvalidSelectionError:
            choice = None

        flows = {
            1: self._customer_flow,
            2: self._manager_flow,
            3: self._staff_flow,
        }
        flow = flows.get(choice)
        if flow is None:
            logger.debug("role_rejected choice=%r", choice)
            self.console.print("Invalid role selection.", style="red")
            return SessionOutcome.INVALID_ROLE

        logger.debug("role_selected choice=%d", choice)
        outcome = flow()
        logger.debug("session_end outcome=%s", outcome.value)
        return outcome

    def _ask(self, prompt: str) -> str:
        return Prompt.ask(prompt, console=self.console, stream=self.stream)

    def _ask_int(self, prompt: str) -> int:
        return self._parse_int(self._ask(prompt))

    @staticmethod
    def _parse_int(raw: str) -> int:
        raw = raw.strip()
        try:
            return int(raw)
        except ValueError:
            raise InvalidSelectionError(f"Expected a whole number, got {raw!r}") from None

    def _customer_flow(self) -> SessionOutcome:
        self.console.print("\nAvailable Tables:")
        for table in self.tables.list():
            self.console.print(format_table(table))

        try:
            self.booked_table = self.tables.book_number(self._ask_int("Select table number to book"))
        except (InvalidSelectionError, TableUnavailableError) as exc:
            logger.info("booking_failed reason=%s", exc)
            self.console.print("Invalid or already booked table.", style="red")
            self.console.print(str(exc), style="dim", markup=False)
            return SessionOutcome.TABLE_UNAVAILABLE
        self.console.print(f"Table {self.booked_table.number} booked successfully!", style="green")

        self.console.print("Plan Event: 1-Birthday Party, 2-Anniversary, 3-No Event")
        self.event = self._read_event()
        self.console.print(f"Event Planned: {self.event.label}")

        self.console.print("\nMenu:")
        for position, item in enumerate(self.catalog.items, start=1):
            self.console.print(format_menu_item(position, item))

        self._collect_orders()
        self._dispatch_orders()
        bill = self._print_bill()
        self._take_payment(bill)

        self.console.print(f"Enjoy your {self.event.label} at Table {self.booked_table.number}!")
        self.console.print("You can go to rear view of restaurant and click photos!")
        return SessionOutcome.COMPLETED

    def _read_event(self) -> EventType:
        try:
            choice = self._ask_int("Event")
        except InvalidSelectionError:
            return EventType.NO_EVENT
        return EventType(EVENT_CHOICES.get(choice, EventType.NO_EVENT.value))

    def _collect_orders(self) -> None:
        while True:
            try:
                self._take_order()
            except (InvalidSelectionError, InvalidQuantityError) as exc:
                logger.info("order_attempt_skipped reason=%s", exc)
                self.console.print(str(exc), style="red", markup=False)

            if len(self.ledger) >= self.max_order_lines:
                self.console.print(f"Order limit of {self.max_order_lines} items reached.", style="yellow")
                return

            answer = self._ask("Order more items? (y/n)").strip()
            if answer[:1] not in ("y", "Y"):
                return

    def _take_order(self) -> None:
        # Both answers of the pair are read before either is validated.
        raw_position = self._ask("Enter item number")
        raw_quantity = self._ask("Enter quantity")
        item = self.catalog.get(self._parse_int(raw_position))
        quantity = self._parse_int(raw_quantity)
        self.ledger.add_order(item, quantity)
        self.console.print(f"Added {quantity} x {item.name}")

    def _dispatch_orders(self) -> None:
        lines = self.ledger.lines
        if not lines:
            return
        self.kitchen.display_kitchen_info()
        for line in lines:
            self.manager.assign_order_to_kitchen(self.kitchen, line)

    def _print_bill(self) -> Bill:
        self.console.print("\nGenerating Bill...")
        bill = self.ledger.generate_bill()
        for line in format_bill(bill):
            self.console.print(line)
        return bill

    def _take_payment(self, bill: Bill) -> None:
        method = self._ask("Enter payment method (Cash/Card/UPI)")
        try:
            self.payments.process_payment(method, bill.total)
        except InvalidPaymentMethodError as exc:
            # Booking and bill stand even when payment is refused.
            self.console.print(str(exc), style="red", markup=False)

    def _manager_flow(self) -> SessionOutcome:
        self.console.print("\nManager Dashboard:")
        self.console.print(f"Manager: {self.manager.name}")
        self.manager.display_staff()
        return SessionOutcome.COMPLETED

    def _staff_flow(self) -> SessionOutcome:
        name = self._ask("\nEnter your name")
        staff = self.manager.roster.lookup_task(name)
        if staff is None:
            self.console.print("Staff not found!", style="red")
            return SessionOutcome.STAFF_NOT_FOUND
        self.console.print(f"Your assigned task: {staff.task}")
        return SessionOutcome.COMPLETED
