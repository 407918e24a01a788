"""Transaction log service."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from carddesk.modules.cards.exceptions import CardNotFoundError
from carddesk.modules.cards.repository import CardRepository

from .models import TransactionRecord
from .repository import TransactionRepository


@dataclass(slots=True)
class TransactionService:
    repository: TransactionRepository
    cards: CardRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "TransactionService":
        from carddesk.infrastructure.database.repositories import SqlCardRepository, SqlTransactionRepository

        return cls(SqlTransactionRepository(session), SqlCardRepository(session))

    async def list_for_card(self, card_number: str) -> list[TransactionRecord]:
        if await self.cards.get_by_number(card_number) is None:
            raise CardNotFoundError()
        return list(await self.repository.list_for_card(card_number))
