"""Transaction log exports."""

from .models import TransactionRecord, TransactionType
from .service import TransactionService

__all__ = ["TransactionRecord", "TransactionService", "TransactionType"]
