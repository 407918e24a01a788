"""Employee credential store."""

from .exceptions import EmployeeAlreadyExistsError, EmployeeNotFoundError, UnknownPermissionError
from .models import (
    DEFAULT_PERMISSIONS,
    KNOWN_PERMISSIONS,
    PROCESS_DEPOSIT,
    PROCESS_WITHDRAWAL,
    Employee,
    EmployeeCreateInput,
)
from .service import EmployeeService

__all__ = [
    "DEFAULT_PERMISSIONS",
    "KNOWN_PERMISSIONS",
    "PROCESS_DEPOSIT",
    "PROCESS_WITHDRAWAL",
    "Employee",
    "EmployeeAlreadyExistsError",
    "EmployeeCreateInput",
    "EmployeeNotFoundError",
    "EmployeeService",
    "UnknownPermissionError",
]
