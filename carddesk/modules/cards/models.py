"""Domain models for payment cards."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from carddesk.core.money import from_cents


@dataclass(slots=True)
class Card:
    card_number: str
    holder_name: str
    balance_cents: int
    created_at: Optional[datetime] = None

    @property
    def balance(self) -> Decimal:
        return from_cents(self.balance_cents)


@dataclass(slots=True)
class CardCreateInput:
    card_number: str
    holder_name: str
    initial_balance: Decimal = Decimal("0")
