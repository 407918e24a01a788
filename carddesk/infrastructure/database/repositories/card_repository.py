"""SQLAlchemy implementation of the card ledger repository."""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from carddesk.db.models import Card as CardModel
from carddesk.modules.cards.exceptions import CardAlreadyExistsError
from carddesk.modules.cards.models import Card


class SqlCardRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_number(self, card_number: str) -> Card | None:
        stmt = (
            select(CardModel)
            .where(CardModel.card_number == card_number)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return self._to_domain(result.scalars().first())

    async def list_cards(self) -> list[Card]:
        stmt = (
            select(CardModel)
            .order_by(CardModel.created_at, CardModel.card_number)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create_card(self, *, card_number: str, holder_name: str, balance_cents: int) -> Card:
        model = CardModel(card_number=card_number, holder_name=holder_name, balance_cents=balance_cents)
        self.session.add(model)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            raise CardAlreadyExistsError() from exc
        await self.session.refresh(model)
        return self._to_domain(model)

    async def compare_and_set_balance(self, card_number: str, *, expected_cents: int, new_cents: int) -> bool:
        stmt = (
            update(CardModel)
            .where(CardModel.card_number == card_number, CardModel.balance_cents == expected_cents)
            .values(balance_cents=new_cents)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    @staticmethod
    def _to_domain(model: CardModel | None) -> Card | None:
        if model is None:
            return None
        return Card(
            card_number=model.card_number,
            holder_name=model.holder_name,
            balance_cents=model.balance_cents,
            created_at=model.created_at,
        )
