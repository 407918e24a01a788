"""Repository protocol for employees."""

from __future__ import annotations

from typing import Iterable, Protocol

from .models import Employee


class EmployeeRepository(Protocol):
    """Abstract repository interface for employee persistence."""

    async def get_by_employee_id(self, employee_id: str) -> Employee | None:
        ...

    async def get_by_email(self, email: str) -> Employee | None:
        ...

    async def create_employee(
        self,
        *,
        employee_id: str,
        name: str,
        email: str,
        password_hash: str,
        permissions: Iterable[str],
    ) -> Employee:
        """Insert a new employee; raises ``EmployeeAlreadyExistsError`` on a unique violation."""
        ...

    async def set_permissions(self, employee_id: str, permissions: Iterable[str]) -> Employee:
        ...
