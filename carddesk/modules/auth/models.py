"""Domain models for sessions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from carddesk.modules.employees.models import Employee


@dataclass(frozen=True, slots=True)
class IssuedToken:
    token: str
    expires_at: datetime
    employee: Employee
