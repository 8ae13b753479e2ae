"""Seed data turned into domain objects."""

from __future__ import annotations

from decimal import Decimal

from restaurant.constant import MENU_ITEMS, STAFF, TABLES
from restaurant.models import Category, MenuItem, Role, Staff, Table

MENU: tuple[MenuItem, ...] = tuple(
    MenuItem(
        name=str(raw["name"]),
        price=Decimal(str(raw["price"])),
        category=Category(raw["category"]),
    )
    for raw in MENU_ITEMS
)


def seed_tables() -> list[Table]:
    """Build a fresh, fully available set of tables for a new session."""
    return [
        Table(
            number=int(raw["number"]),
            capacity=int(raw["capacity"]),
            cost_per_meal=Decimal(str(raw["cost_per_meal"])),
        )
        for raw in TABLES
    ]


def seed_staff() -> list[Staff]:
    """Build fresh staff records with no tasks assigned yet."""
    return [Staff(name=raw["name"], role=Role.from_label(raw["role"])) for raw in STAFF]
