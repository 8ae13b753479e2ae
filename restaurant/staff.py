"""Staff roster and role-based task assignment."""

from __future__ import annotations

import logging
from typing import Iterable

from restaurant.constant import ROLE_TASKS
from restaurant.models import Role, Staff

logger = logging.getLogger(__name__)

RECOGNIZED_ROLES = frozenset({Role.COOK, Role.WAITER, Role.SWEEPER})


class StaffRoster:
    """Staff members kept in insertion order."""

    def __init__(self, members: Iterable[Staff] = ()) -> None:
        self._members: list[Staff] = list(members)

    def add_staff(self, staff: Staff) -> None:
        self._members.append(staff)

    def members(self) -> list[Staff]:
        return list(self._members)

    def assign_tasks(self) -> None:
        """Set each member's task from their role; unrecognized roles are left alone."""
        for staff in self._members:
            task = ROLE_TASKS.get(staff.role.value)
            if task is not None:
                staff.task = task
        logger.debug("tasks_assigned members=%d", len(self._members))

    def lookup_task(self, name: str) -> Staff | None:
        """
        Find the staff record reported to a staff member signing in.

        The entered name is not compared against the roster: the first member
        holding a recognized role is returned whatever name was typed. Callers
        get None only when nobody holds a recognized role.
        """
        logger.debug("staff_lookup name=%r (name is not matched)", name)
        for staff in self._members:
            if staff.role in RECOGNIZED_ROLES:
                return staff
        return None
