"""Branch registry exceptions."""

from carddesk.core.exceptions import DuplicateError, NotFoundError


class BranchAlreadyExistsError(DuplicateError):
    default_message = "Branch already exists"


class BranchNotFoundError(NotFoundError):
    default_message = "Branch not found"
