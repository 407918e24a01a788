"""SQLAlchemy-backed repository implementations."""

from .branch_repository import SqlBranchRepository
from .card_repository import SqlCardRepository
from .employee_repository import SqlEmployeeRepository
from .transaction_repository import SqlTransactionRepository

__all__ = [
    "SqlBranchRepository",
    "SqlCardRepository",
    "SqlEmployeeRepository",
    "SqlTransactionRepository",
]
