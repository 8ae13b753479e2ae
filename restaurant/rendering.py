"""Rendering helpers for console listings and the bill."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from rich.text import Text

from restaurant.config import CURRENCY_SYMBOL
from restaurant.models import Bill, Category, MenuItem, Staff, Table


def format_money(amount: Decimal) -> str:
    """Format an amount as currency, rounding half cents up."""
    cents = Decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{CURRENCY_SYMBOL}{cents}"


def badge_style(category: Category) -> str:
    """Return a consistent badge style for category tags."""
    if category is Category.BEVERAGE:
        return "bold #ffffff on #2f6db5"
    return "bold #0b1f0f on #5fbf72"


def format_table(table: Table) -> Text:
    text = Text(
        f"Table {table.number} | Capacity: {table.capacity} | "
        f"Cost per meal: {format_money(table.cost_per_meal)} | "
    )
    if table.booked:
        text.append("Booked", style="bold red")
    else:
        text.append("Available", style="green")
    return text


def format_menu_item(position: int, item: MenuItem) -> Text:
    """Render a numbered menu row with a colored category tag."""
    text = Text(f"{position}. ")
    text.append(item.name)
    text.append(f" - {format_money(item.price)} ")
    text.append(item.category.value.upper()[0], style=badge_style(item.category))
    return text


def format_staff(staff: Staff) -> Text:
    return Text(f"Name: {staff.name} | Role: {staff.role.label} | Task: {staff.task}")


def format_bill(bill: Bill) -> list[Text]:
    """Render bill rows followed by subtotal, tax and total lines."""
    lines = [
        Text(f"Item: {line.name}, Quantity: {line.quantity}, Price: {format_money(line.price)}")
        for line in bill.lines
    ]
    lines.append(Text(f"Subtotal: {format_money(bill.subtotal)}"))
    lines.append(Text(f"Tax: {format_money(bill.tax)}"))
    lines.append(Text(f"Total: {format_money(bill.total)}", style="bold"))
    return lines
