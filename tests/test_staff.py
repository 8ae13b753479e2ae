from decimal import Decimal

from restaurant.constant import DEFAULT_TASK
from restaurant.data import seed_staff
from restaurant.kitchen import KitchenHandler
from restaurant.manager import ManagerConsole
from restaurant.models import Category, MenuItem, OrderLine, Role, Staff
from restaurant.staff import StaffRoster


def test_role_labels_parse_case_insensitively():
    assert Role.from_label("COOK") is Role.COOK
    assert Role.from_label(" waiter ") is Role.WAITER
    assert Role.from_label("Cashier") is Role.OTHER


def test_assign_tasks_by_role():
    roster = StaffRoster(seed_staff())
    roster.add_staff(Staff("Dana", Role.OTHER))
    roster.assign_tasks()
    assert [(staff.name, staff.task) for staff in roster.members()] == [
        ("Alice", "Prepare food orders"),
        ("Bob", "Serve tables to customers"),
        ("Charlie", "Clean tables and kitchen"),
        ("Dana", DEFAULT_TASK),
    ]


def test_assign_tasks_is_idempotent():
    roster = StaffRoster(seed_staff())
    roster.assign_tasks()
    first = [staff.task for staff in roster.members()]
    roster.assign_tasks()
    assert [staff.task for staff in roster.members()] == first


def test_lookup_ignores_name_and_returns_first_recognized_role():
    roster = StaffRoster([Staff("Dana", Role.OTHER), Staff("Bob", Role.WAITER), Staff("Alice", Role.COOK)])
    assert roster.lookup_task("Alice").name == "Bob"
    assert roster.lookup_task("nobody").name == "Bob"


def test_lookup_without_recognized_roles():
    assert StaffRoster([Staff("Dana", Role.OTHER)]).lookup_task("Dana") is None


def test_display_staff_in_insertion_order(console, output):
    manager = ManagerConsole("Mr. John", StaffRoster(), console)
    manager.add_staff(Staff("Zoe", Role.SWEEPER))
    manager.add_staff(Staff("Adam", Role.COOK))
    manager.assign_tasks()
    manager.display_staff()

    out = output()
    assert "Staff in the restaurant:" in out
    assert out.index("Zoe") < out.index("Adam")
    assert "Name: Adam | Role: Cook | Task: Prepare food orders" in out


def test_assign_order_to_kitchen_forwards_order(console, output):
    manager = ManagerConsole("Mr. John", StaffRoster(), console)
    order = OrderLine(MenuItem("Pasta", Decimal("10"), Category.FOOD), 2)

    assert manager.assign_order_to_kitchen(KitchenHandler(console), order) is None

    out = output()
    assert "Manager assigns order to kitchen." in out
    assert "Kitchen is cooking 2 x Pasta" in out
