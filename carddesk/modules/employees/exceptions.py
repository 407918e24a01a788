"""Employee domain specific exceptions."""

from carddesk.core.exceptions import DuplicateError, NotFoundError, ValidationError


class EmployeeAlreadyExistsError(DuplicateError):
    """Raised when the employee id or email is already registered."""

    default_message = "Employee already exists"


class EmployeeNotFoundError(NotFoundError):
    default_message = "Employee not found"


class UnknownPermissionError(ValidationError):
    default_message = "Unknown permission"
