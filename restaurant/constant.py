"""Editable static menu, seating and staff configuration."""

from __future__ import annotations

MENU_ITEMS: list[dict[str, str]] = [
    {"name": "Pizza", "price": "12.0", "category": "food"},
    {"name": "Burger", "price": "8.0", "category": "food"},
    {"name": "Pasta", "price": "10.0", "category": "food"},
    {"name": "Coke", "price": "3.0", "category": "beverage"},
    {"name": "Coffee", "price": "4.0", "category": "beverage"},
]

TABLES: list[dict[str, int | str]] = [
    {"number": 1, "capacity": 4, "cost_per_meal": "50.0"},
    {"number": 2, "capacity": 6, "cost_per_meal": "80.0"},
    {"number": 3, "capacity": 2, "cost_per_meal": "30.0"},
]

STAFF: list[dict[str, str]] = [
    {"name": "Alice", "role": "Cook"},
    {"name": "Bob", "role": "Waiter"},
    {"name": "Charlie", "role": "Sweeper"},
]

ROLE_TASKS: dict[str, str] = {
    "cook": "Prepare food orders",
    "waiter": "Serve tables to customers",
    "sweeper": "Clean tables and kitchen",
}

DEFAULT_TASK = "No task assigned"

EVENT_LABELS: dict[str, str] = {
    "birthday_party": "Birthday Party",
    "anniversary": "Anniversary",
    "no_event": "No Event",
}

# Numbered choices offered in the event prompt; anything else means no event.
EVENT_CHOICES: dict[int, str] = {
    1: "birthday_party",
    2: "anniversary",
    3: "no_event",
}
