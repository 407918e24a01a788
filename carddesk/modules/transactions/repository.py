"""Repository protocol for the append-only transaction log."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import TransactionRecord


class TransactionRepository(Protocol):
    async def add(self, record: TransactionRecord) -> TransactionRecord:
        ...

    async def list_for_card(self, card_number: str) -> Sequence[TransactionRecord]:
        ...
