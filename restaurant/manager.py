"""Manager console: staff oversight and kitchen dispatch."""

from __future__ import annotations

import logging

from rich.console import Console

from restaurant.kitchen import KitchenHandler
from restaurant.models import OrderLine, Staff
from restaurant.rendering import format_staff
from restaurant.staff import StaffRoster

logger = logging.getLogger(__name__)


class ManagerConsole:
    def __init__(self, name: str, roster: StaffRoster, console: Console) -> None:
        self.name = name
        self.roster = roster
        self.console = console

    def add_staff(self, staff: Staff) -> None:
        self.roster.add_staff(staff)

    def assign_tasks(self) -> None:
        self.roster.assign_tasks()

    def display_staff(self) -> None:
        self.console.print("Staff in the restaurant:")
        for staff in self.roster.members():
            self.console.print(format_staff(staff))

    def assign_order_to_kitchen(self, kitchen: KitchenHandler, order: OrderLine) -> None:
        """Hand a single order line to the kitchen."""
        logger.info("manager=%s dispatching %d x %s", self.name, order.quantity, order.item.name)
        self.console.print("Manager assigns order to kitchen.")
        kitchen.cook_order(order)
