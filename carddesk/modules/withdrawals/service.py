"""Balance movements: withdrawals and deposits against a card.

A movement is one unit of work: permission check, balance read, conditional
balance update, transaction log append. The balance update is a
compare-and-set on the value read, so two concurrent withdrawals cannot both
pass the sufficiency check against the same pre-debit balance; the loser
re-reads and re-checks. Both writes happen in the caller's database
transaction, and nothing persists until the caller commits.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from carddesk.core.config import Settings
from carddesk.core.exceptions import (
    AmountOutOfRangeError,
    ConcurrentUpdateError,
    InsufficientBalanceError,
    PermissionDeniedError,
    ValidationError,
)
from carddesk.core.money import MAX_CENTS, from_cents, to_cents
from carddesk.core.security import TokenClaims
from carddesk.modules.cards.exceptions import CardNotFoundError
from carddesk.modules.cards.repository import CardRepository
from carddesk.modules.employees.models import PROCESS_DEPOSIT, PROCESS_WITHDRAWAL
from carddesk.modules.transactions.models import TransactionRecord, TransactionType
from carddesk.modules.transactions.repository import TransactionRepository

logger = logging.getLogger(__name__)

DEFAULT_MAX_RETRIES = 5


@dataclass(frozen=True, slots=True)
class MovementResult:
    new_balance: Decimal
    transaction_id: str


@dataclass(slots=True)
class WithdrawalService:
    cards: CardRepository
    transactions: TransactionRepository
    max_retries: int = DEFAULT_MAX_RETRIES

    @classmethod
    def with_session(cls, session: AsyncSession, settings: Settings) -> "WithdrawalService":
        from carddesk.infrastructure.database.repositories import SqlCardRepository, SqlTransactionRepository

        return cls(
            SqlCardRepository(session),
            SqlTransactionRepository(session),
            max_retries=settings.withdrawals.max_balance_retries,
        )

    async def withdraw(
        self,
        claims: TokenClaims,
        card_number: str,
        amount: Decimal,
        branch_id: str,
    ) -> MovementResult:
        if not claims.has_permission(PROCESS_WITHDRAWAL):
            raise PermissionDeniedError()
        try:
            cents = self._positive_cents(amount)
        except AmountOutOfRangeError:
            if Decimal(str(amount)) <= 0:
                raise ValidationError("Amount must be greater than zero") from None
            # Exceeds every storable balance; the card lookup still decides 404 first.
            cents = MAX_CENTS + 1
        return await self._move(claims, card_number, -cents, branch_id)

    async def deposit(
        self,
        claims: TokenClaims,
        card_number: str,
        amount: Decimal,
        branch_id: str,
    ) -> MovementResult:
        if not claims.has_permission(PROCESS_DEPOSIT):
            raise PermissionDeniedError()
        return await self._move(claims, card_number, self._positive_cents(amount), branch_id)

    @staticmethod
    def _positive_cents(amount: Decimal) -> int:
        cents = to_cents(amount)
        if cents <= 0:
            raise ValidationError("Amount must be greater than zero")
        return cents

    async def _move(self, claims: TokenClaims, card_number: str, delta_cents: int, branch_id: str) -> MovementResult:
        tx_type = TransactionType.DEPOSIT if delta_cents > 0 else TransactionType.WITHDRAWAL

        for attempt in range(1, self.max_retries + 1):
            card = await self.cards.get_by_number(card_number)
            if card is None:
                raise CardNotFoundError()

            new_cents = card.balance_cents + delta_cents
            if new_cents < 0:
                raise InsufficientBalanceError()
            if new_cents > MAX_CENTS:
                raise AmountOutOfRangeError("Balance would exceed the supported maximum")

            swapped = await self.cards.compare_and_set_balance(
                card_number,
                expected_cents=card.balance_cents,
                new_cents=new_cents,
            )
            if not swapped:
                logger.warning(
                    "Balance of card %s changed during %s (attempt %d/%d)",
                    card_number,
                    tx_type.value,
                    attempt,
                    self.max_retries,
                )
                continue

            record = await self.transactions.add(
                TransactionRecord(
                    transaction_id=str(uuid.uuid4()),
                    card_number=card_number,
                    amount_cents=abs(delta_cents),
                    branch_id=branch_id,
                    type=tx_type,
                    timestamp=datetime.now(timezone.utc),
                )
            )
            logger.info(
                "%s of %s on card %s by employee %s at branch %s (transaction %s)",
                tx_type.value.capitalize(),
                from_cents(abs(delta_cents)),
                card_number,
                claims.employee_id,
                branch_id,
                record.transaction_id,
            )
            return MovementResult(new_balance=from_cents(new_cents), transaction_id=record.transaction_id)

        raise ConcurrentUpdateError()
