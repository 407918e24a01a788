"""Login and session token verification."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from carddesk.core.config import SecuritySettings, Settings
from carddesk.core.exceptions import InvalidCredentialsError
from carddesk.core.security import TokenClaims, create_access_token, decode_access_token
from carddesk.modules.employees.service import EmployeeService

from .models import IssuedToken

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AuthService:
    employees: EmployeeService
    settings: SecuritySettings

    @classmethod
    def with_session(cls, session: AsyncSession, settings: Settings) -> "AuthService":
        return cls(EmployeeService.with_session(session, settings), settings.security)

    async def login(self, email: str, password: str) -> IssuedToken:
        employee = await self.employees.authenticate(email, password)
        if employee is None:
            logger.warning("Failed login attempt")
            raise InvalidCredentialsError()

        token, expires_at = create_access_token(
            self.settings,
            employee.employee_id,
            employee.name,
            employee.permissions,
        )
        logger.info("Employee %s logged in", employee.employee_id)
        return IssuedToken(token=token, expires_at=expires_at, employee=employee)

    def verify(self, token: str) -> TokenClaims:
        return decode_access_token(self.settings, token)
