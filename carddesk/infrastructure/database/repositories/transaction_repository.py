"""SQLAlchemy implementation of the transaction log"""

from __future__ import annotations

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from carddesk.db.models import Transaction as TransactionModel
from carddesk.modules.transactions.models import TransactionRecord, TransactionType


class SqlTransactionRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add(self, record: TransactionRecord) -> TransactionRecord:
        model = TransactionModel(
            transaction_id=record.transaction_id,
            card_number=record.card_number,
            amount_cents=record.amount_cents,
            branch_id=record.branch_id,
            type=record.type.value,
            timestamp=record.timestamp,
        )
        self.session.add(model)
        await self.session.flush()
        return record

    async def list_for_card(self, card_number: str) -> list[TransactionRecord]:
        stmt = (
            select(TransactionModel)
            .where(TransactionModel.card_number == card_number)
            .order_by(desc(TransactionModel.timestamp), desc(TransactionModel.transaction_id))
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    @staticmethod
    def _to_domain(model: TransactionModel) -> TransactionRecord:
        return TransactionRecord(
            transaction_id=model.transaction_id,
            card_number=model.card_number,
            amount_cents=model.amount_cents,
            branch_id=model.branch_id,
            type=TransactionType(model.type),
            timestamp=model.timestamp,
        )
