"""Withdrawal and deposit endpoints."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from carddesk.core.config import Settings
from carddesk.core.security import TokenClaims
from carddesk.interfaces.http.deps import get_app_settings, get_db_session, require_permission
from carddesk.modules.employees import PROCESS_DEPOSIT, PROCESS_WITHDRAWAL
from carddesk.modules.withdrawals import WithdrawalService
from carddesk.schemas import BalanceMovementRequest, BalanceMovementResponse

router = APIRouter()


@router.post("/withdraw", response_model=BalanceMovementResponse, summary="Withdraw from a card")
async def withdraw(
    payload: BalanceMovementRequest,
    claims: TokenClaims = Depends(require_permission(PROCESS_WITHDRAWAL)),
    db: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_app_settings),
) -> BalanceMovementResponse:
    service = WithdrawalService.with_session(db, settings)
    result = await service.withdraw(claims, payload.card_number, payload.amount, payload.branch_id)
    # Debit and log entry become visible together or not at all.
    await db.commit()
    return BalanceMovementResponse(new_balance=result.new_balance, transaction_id=result.transaction_id)


@router.post("/deposit", response_model=BalanceMovementResponse, summary="Deposit to a card")
async def deposit(
    payload: BalanceMovementRequest,
    claims: TokenClaims = Depends(require_permission(PROCESS_DEPOSIT)),
    db: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_app_settings),
) -> BalanceMovementResponse:
    service = WithdrawalService.with_session(db, settings)
    result = await service.deposit(claims, payload.card_number, payload.amount, payload.branch_id)
    await db.commit()
    return BalanceMovementResponse(new_balance=result.new_balance, transaction_id=result.transaction_id)
