"""Kitchen notifications."""

from __future__ import annotations

import logging

from rich.console import Console

from restaurant.models import OrderLine

logger = logging.getLogger(__name__)


class KitchenHandler:
    """Announces orders as they are cooked; keeps no queue or state."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def display_kitchen_info(self) -> None:
        self.console.print("Kitchen is ready to process orders...")

    def cook_order(self, order: OrderLine) -> None:
        logger.debug("cooking item=%s quantity=%d", order.item.name, order.quantity)
        self.console.print(f"Kitchen is cooking {order.quantity} x {order.item.name}")
