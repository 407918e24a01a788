"""Card ledger service."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from carddesk.core.exceptions import ValidationError
from carddesk.core.money import to_cents

from .exceptions import CardNotFoundError
from .models import Card, CardCreateInput
from .repository import CardRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CardService:
    repository: CardRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "CardService":
        from carddesk.infrastructure.database.repositories.card_repository import SqlCardRepository

        return cls(SqlCardRepository(session))

    async def create(self, payload: CardCreateInput) -> Card:
        balance_cents = to_cents(payload.initial_balance or 0)
        if balance_cents < 0:
            raise ValidationError("Initial balance must not be negative")
        card = await self.repository.create_card(
            card_number=payload.card_number,
            holder_name=payload.holder_name,
            balance_cents=balance_cents,
        )
        logger.info("Issued card %s with balance %s", card.card_number, card.balance)
        return card

    async def list_all(self) -> list[Card]:
        return list(await self.repository.list_cards())

    async def find_by_number(self, card_number: str) -> Card:
        card = await self.repository.get_by_number(card_number)
        if card is None:
            raise CardNotFoundError()
        return card
