"""Domain models for the transaction log."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from carddesk.core.money import from_cents


class TransactionType(str, Enum):
    WITHDRAWAL = "withdrawal"
    DEPOSIT = "deposit"


@dataclass(frozen=True, slots=True)
class TransactionRecord:
    transaction_id: str
    card_number: str
    amount_cents: int
    branch_id: str
    type: TransactionType
    timestamp: datetime

    @property
    def amount(self) -> Decimal:
        return from_cents(self.amount_cents)
