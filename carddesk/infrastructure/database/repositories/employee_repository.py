"""SQLAlchemy implementation of the employee repository."""

from __future__ import annotations

from typing import Iterable

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from carddesk.db.models import Employee as EmployeeModel
from carddesk.modules.employees.exceptions import EmployeeAlreadyExistsError, EmployeeNotFoundError
from carddesk.modules.employees.models import Employee


class SqlEmployeeRepository:
    """Employee repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_employee_id(self, employee_id: str) -> Employee | None:
        model = await self._session.get(EmployeeModel, employee_id)
        return self._to_domain(model)

    async def get_by_email(self, email: str) -> Employee | None:
        stmt = select(EmployeeModel).where(EmployeeModel.email == email)
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def create_employee(
        self,
        *,
        employee_id: str,
        name: str,
        email: str,
        password_hash: str,
        permissions: Iterable[str],
    ) -> Employee:
        model = EmployeeModel(
            employee_id=employee_id,
            name=name,
            email=email,
            password_hash=password_hash,
            permissions=sorted(permissions),
        )
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._session.rollback()
            raise EmployeeAlreadyExistsError() from exc
        await self._session.refresh(model)
        return self._to_domain(model)

    async def set_permissions(self, employee_id: str, permissions: Iterable[str]) -> Employee:
        model = await self._session.get(EmployeeModel, employee_id)
        if model is None:
            raise EmployeeNotFoundError()
        model.permissions = sorted(permissions)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_domain(model)

    @staticmethod
    def _to_domain(model: EmployeeModel | None) -> Employee | None:
        if model is None:
            return None
        return Employee(
            employee_id=model.employee_id,
            name=model.name,
            email=model.email,
            permissions=frozenset(model.permissions or ()),
            password_hash=model.password_hash,
            created_at=model.created_at,
        )
