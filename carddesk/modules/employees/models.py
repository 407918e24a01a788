"""Domain models for employees."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

PROCESS_WITHDRAWAL = "processWithdrawal"
PROCESS_DEPOSIT = "processDeposit"

KNOWN_PERMISSIONS = frozenset({PROCESS_WITHDRAWAL, PROCESS_DEPOSIT})
DEFAULT_PERMISSIONS = frozenset({PROCESS_WITHDRAWAL})


@dataclass(slots=True)
class Employee:
    employee_id: str
    name: str
    email: str
    permissions: frozenset[str]
    password_hash: str = field(repr=False)
    created_at: Optional[datetime] = None

    def has_permission(self, permission: str) -> bool:
        return permission in self.permissions


@dataclass(slots=True)
class EmployeeCreateInput:
    employee_id: str
    name: str
    email: str
    password: str
