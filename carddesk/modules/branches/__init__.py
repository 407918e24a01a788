"""Branch registry exports."""

from .exceptions import BranchAlreadyExistsError, BranchNotFoundError
from .models import Branch
from .service import BranchService

__all__ = ["Branch", "BranchAlreadyExistsError", "BranchNotFoundError", "BranchService"]
