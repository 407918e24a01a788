"""Domain services for employee registration and credential checks."""

from __future__ import annotations

import logging
from typing import Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from carddesk.core.config import Settings
from carddesk.core.crypto import DEFAULT_ROUNDS, dummy_hash, hash_password, verify_password

from .exceptions import EmployeeNotFoundError, UnknownPermissionError
from .models import DEFAULT_PERMISSIONS, KNOWN_PERMISSIONS, Employee, EmployeeCreateInput
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class EmployeeService:
    """Encapsulates core employee use cases."""

    def __init__(self, repository: EmployeeRepository, bcrypt_rounds: int = DEFAULT_ROUNDS) -> None:
        self._repository = repository
        self._bcrypt_rounds = bcrypt_rounds

    @classmethod
    def with_session(cls, session: AsyncSession, settings: Settings) -> "EmployeeService":
        from carddesk.infrastructure.database.repositories.employee_repository import SqlEmployeeRepository

        return cls(SqlEmployeeRepository(session), bcrypt_rounds=settings.security.bcrypt_rounds)

    async def get_by_employee_id(self, employee_id: str) -> Employee | None:
        return await self._repository.get_by_employee_id(employee_id)

    async def get_by_email(self, email: str) -> Employee | None:
        return await self._repository.get_by_email(normalize_email(email))

    async def find_by_employee_id(self, employee_id: str) -> Employee:
        employee = await self._repository.get_by_employee_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError()
        return employee

    async def find_by_email(self, email: str) -> Employee:
        employee = await self.get_by_email(email)
        if employee is None:
            raise EmployeeNotFoundError()
        return employee

    async def register(self, payload: EmployeeCreateInput) -> Employee:
        employee = await self._repository.create_employee(
            employee_id=payload.employee_id,
            name=payload.name,
            email=normalize_email(payload.email),
            password_hash=hash_password(payload.password, rounds=self._bcrypt_rounds),
            permissions=DEFAULT_PERMISSIONS,
        )
        logger.info("Registered employee %s", employee.employee_id)
        return employee

    async def authenticate(self, email: str, password: str) -> Employee | None:
        employee = await self.get_by_email(email)
        if employee is None:
            # Same bcrypt cost as a real check, so unknown emails are not faster.
            verify_password(password, dummy_hash(self._bcrypt_rounds))
            return None
        if not verify_password(password, employee.password_hash):
            return None
        return employee

    async def grant_permissions(self, employee_id: str, permissions: Iterable[str]) -> Employee:
        requested = frozenset(permissions)
        unknown = requested - KNOWN_PERMISSIONS
        if unknown:
            raise UnknownPermissionError(f"Unknown permission: {', '.join(sorted(unknown))}")

        current = await self.find_by_employee_id(employee_id)
        employee = await self._repository.set_permissions(employee_id, current.permissions | requested)
        logger.info("Granted %s to employee %s", sorted(requested), employee_id)
        return employee
